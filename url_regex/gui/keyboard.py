"""Keyboard shortcut handling."""

class KeyboardShortcuts:
    """Manages keyboard shortcuts"""

    shortcuts = {
        "<Control-Return>": "process_urls",
        "<Control-l>": "use_clipboard_content",
        "<Escape>": "clear_input",
    }

    def __init__(self, parent):
        self.parent = parent
        self.setup_shortcuts()

    def setup_shortcuts(self):
        """Setup keyboard shortcuts"""
        for key, method_name in self.shortcuts.items():
            self.parent.root.bind(key, lambda e, name=method_name: self.trigger(name))

    def trigger(self, method_name):
        """Call the handler by name so later patches are honoured"""
        getattr(self.parent, method_name)()
        return "break"
