from setuptools import setup, find_packages

setup(
    name="url-regex",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyperclip",
    ],
    entry_points={
        "console_scripts": [
            "url-regex=url_regex.app:main",
        ],
    },
)
