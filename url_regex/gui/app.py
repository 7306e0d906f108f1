"""Main window for the regex concatenation tool."""

import logging

# GUI imports
import tkinter as tk
from tkinter import scrolledtext, ttk

from url_regex.core.clipboard import (EMPTY_MESSAGE, ClipboardDispatcher,
                                      paste_text)
from url_regex.core.modes import CleanupMode, MatchingMode, PatternConfig
from url_regex.core.pipeline import compute_pattern_for
from url_regex.exceptions import ClipboardError
from url_regex.gui.keyboard import KeyboardShortcuts

logger = logging.getLogger(__name__)

EXAMPLE_URL = "http://www.example.com/category/product"

# (mode, label, removed prefix, remaining part)
CLEANUP_OPTIONS = [
    (CleanupMode.KEEP_FULL, "Don't change anything.", "", EXAMPLE_URL),
    (CleanupMode.REMOVE_SCHEME, "Remove Scheme.",
     "http://", "www.example.com/category/product"),
    (CleanupMode.REMOVE_SCHEME_SUBDOMAIN, "Remove Scheme & Subdomain.",
     "http://www.", "example.com/category/product"),
    (CleanupMode.REMOVE_SCHEME_SUBDOMAIN_DOMAIN, "Remove Scheme, Subdomain, Domain.",
     "http://www.example.com", "/category/product"),
    (CleanupMode.REMOVE_SCHEME_SUBDOMAIN_DOMAIN_SLASH, "Remove Scheme, Sub, Dom, Trailing Slash.",
     "http://www.example.com/", "category/product"),
]

MATCHING_OPTIONS = [
    (MatchingMode.WILDCARD, "Wildcard (e.g., /path/to/page.*)"),
    (MatchingMode.STRICT, "Strict (e.g., /path/to/page$)"),
]


class UrlRegexGUI:
    """Main GUI class for the regex concatenation tool"""

    def __init__(self, root, dispatcher=None, config=None, clipboard_reader=None):
        """Initialize the window.

        Args:
            root: Tk root window
            dispatcher: Object with a ``submit(text, callback)`` method used
                for clipboard writes. Defaults to a ClipboardDispatcher.
            config: Initial mode selection
            clipboard_reader: Callable returning clipboard text for
                "Load Clipboard"; pyperclip when omitted.
        """
        self.root = root
        self.root.title("Regex Concatenation Tool")

        config = config or PatternConfig()
        self.cleanup_var = tk.StringVar(master=root, value=config.cleanup.value)
        self.matching_var = tk.StringVar(master=root, value=config.matching.value)
        self.dispatcher = dispatcher or ClipboardDispatcher()
        self.clipboard_reader = clipboard_reader

        self.setup_gui()
        self.keyboard_shortcuts = KeyboardShortcuts(self)

    @property
    def config(self):
        """Current mode selection as an immutable value"""
        return PatternConfig(
            cleanup=CleanupMode(self.cleanup_var.get()),
            matching=MatchingMode(self.matching_var.get()),
        )

    def setup_gui(self):
        """Setup GUI components and layout"""
        self.main_frame = ttk.Frame(self.root, padding="10")
        self.main_frame.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        # Options row
        self.options_frame = ttk.Frame(self.main_frame)
        self.options_frame.grid(row=0, column=0, sticky=(tk.W, tk.E), pady=5)

        self.cleanup_frame = ttk.LabelFrame(
            self.options_frame, text="URL Clean-Up Options", padding="5"
        )
        self.cleanup_frame.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S), padx=5)

        for row, (mode, label, prefix, remaining) in enumerate(CLEANUP_OPTIONS):
            button = ttk.Radiobutton(
                self.cleanup_frame,
                text=label,
                value=mode.value,
                variable=self.cleanup_var,
                command=self.on_option_changed,
            )
            button.grid(row=row, column=0, sticky=tk.W)
            if prefix:
                hint = ttk.Label(
                    self.cleanup_frame,
                    text=f"{prefix}  →  {remaining}",
                    foreground="grey",
                )
                hint.grid(row=row, column=1, sticky=tk.W, padx=10)

        self.matching_frame = ttk.LabelFrame(
            self.options_frame, text="Regex Matching Options", padding="5"
        )
        self.matching_frame.grid(row=0, column=1, sticky=(tk.W, tk.E, tk.N, tk.S), padx=5)

        for row, (mode, label) in enumerate(MATCHING_OPTIONS):
            ttk.Radiobutton(
                self.matching_frame,
                text=label,
                value=mode.value,
                variable=self.matching_var,
                command=self.on_option_changed,
            ).grid(row=row, column=0, sticky=tk.W)

        # Input frame
        self.input_frame = ttk.LabelFrame(
            self.main_frame, text="Input your list of URLs", padding="5"
        )
        self.input_frame.grid(row=1, column=0, sticky=(tk.W, tk.E, tk.N, tk.S), pady=5)

        ttk.Label(self.input_frame, text="One URL per line.").grid(
            row=0, column=0, columnspan=2, sticky=tk.W
        )
        self.input_text = scrolledtext.ScrolledText(self.input_frame, height=10)
        self.input_text.grid(
            row=1, column=0, columnspan=2, sticky=(tk.W, tk.E, tk.N, tk.S)
        )
        self.input_text.bind("<<Modified>>", self.on_input_modified)

        self.clipboard_button = ttk.Button(
            self.input_frame,
            text="Load Clipboard",
            command=self.use_clipboard_content,
        )
        self.clipboard_button.grid(row=2, column=0, pady=5, padx=5, sticky="ew")

        self.process_button = ttk.Button(
            self.input_frame, text="Process", command=self.process_urls
        )
        self.process_button.grid(row=2, column=1, pady=5, padx=5, sticky="ew")

        # Output frame
        self.output_frame = ttk.LabelFrame(
            self.main_frame,
            text="Output (Automatically Copied to Clipboard):",
            padding="5",
        )
        self.output_frame.grid(row=2, column=0, sticky=(tk.W, tk.E, tk.N, tk.S), pady=5)

        self.output_text = scrolledtext.ScrolledText(
            self.output_frame, height=5, state=tk.DISABLED
        )
        self.output_text.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        self.status_label = ttk.Label(self.output_frame, text="")
        self.status_label.grid(row=1, column=0, pady=5, sticky=tk.W)

        # Configure grid weights
        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)
        self.main_frame.columnconfigure(0, weight=1)
        self.main_frame.rowconfigure(1, weight=2)
        self.main_frame.rowconfigure(2, weight=1)
        self.input_frame.columnconfigure(0, weight=1)
        self.input_frame.columnconfigure(1, weight=1)
        self.input_frame.rowconfigure(1, weight=1)
        self.output_frame.columnconfigure(0, weight=1)
        self.output_frame.rowconfigure(0, weight=1)

    def get_input(self):
        return self.input_text.get("1.0", "end-1c")

    def get_output(self):
        return self.output_text.get("1.0", "end-1c")

    def set_output(self, text):
        """Replace the read-only output area"""
        self.output_text.configure(state=tk.NORMAL)
        self.output_text.delete("1.0", tk.END)
        self.output_text.insert("1.0", text)
        self.output_text.configure(state=tk.DISABLED)

    def set_status(self, message):
        self.status_label.configure(text=message)
        if message:
            logger.info(message)

    def on_input_modified(self, event=None):
        """Re-run the pipeline after every edit of the input"""
        if not self.input_text.edit_modified():
            return
        self.input_text.edit_modified(False)
        self.refresh()

    def on_option_changed(self):
        self.refresh()

    def refresh(self):
        """Recompute on change; blank input clears everything"""
        if not self.get_input().strip():
            self.set_output("")
            self.set_status("")
            return
        self.process_urls()

    def process_urls(self):
        """Build the pattern from the current input and copy it"""
        self.set_status("")
        pattern = compute_pattern_for(self.get_input(), self.config)
        self.set_output(pattern)

        if pattern:
            future = self.dispatcher.submit(pattern, callback=self.on_clipboard_outcome)
            future.add_done_callback(self.on_clipboard_done)
        else:
            self.set_status(EMPTY_MESSAGE)

    def on_clipboard_outcome(self, outcome):
        """Called from the dispatcher thread; hand over to the Tk thread"""
        self.root.after(0, self.set_status, outcome.message)

    def on_clipboard_done(self, future):
        """Log errors raised while reporting a clipboard outcome"""
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            logger.error(f"Clipboard status update failed: {type(error).__name__}: {error}")

    def use_clipboard_content(self):
        """Load clipboard content into input text"""
        try:
            content = paste_text(self.clipboard_reader)
        except ClipboardError as e:
            self.set_status(f"Failed to read clipboard: {e}")
            return
        self.input_text.delete("1.0", tk.END)
        self.input_text.insert("1.0", content)

    def clear_input(self):
        self.input_text.delete("1.0", tk.END)

    def close(self):
        """Shut down the clipboard loop and the window"""
        close = getattr(self.dispatcher, "close", None)
        if close:
            close()
        self.root.destroy()


def run_gui(config=None):
    """Open the main window and block until it is closed"""
    root = tk.Tk()
    root.geometry("900x700")
    app = UrlRegexGUI(root, config=config)
    root.protocol("WM_DELETE_WINDOW", app.close)
    root.mainloop()
    return app
