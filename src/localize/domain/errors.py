class DictionaryError(Exception):
    def __init__(self, message_key: str, detail: str | None = None) -> None:
        super().__init__(message_key)
        self.message_key = message_key
        self.detail = detail
