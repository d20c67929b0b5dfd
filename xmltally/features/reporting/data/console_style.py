class ConsoleStyle:
    """
    Wraps text in ANSI colour codes, or passes it through untouched when disabled.
    """
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"

    def __init__(self, enabled: bool = False):
        self.enabled = enabled

    def _wrap(self, code: str, text: str) -> str:
        if not self.enabled:
            return text
        return f"{code}{text}{self.RESET}"

    def bold(self, text: str) -> str:
        return self._wrap(self.BOLD, text)

    def success(self, text: str) -> str:
        return self._wrap(self.GREEN, text)

    def warning(self, text: str) -> str:
        return self._wrap(self.YELLOW, text)

    def error(self, text: str) -> str:
        return self._wrap(self.RED, text)

    def heading(self, text: str) -> str:
        return self._wrap(self.CYAN + self.BOLD, text)
