class TaskClientException(Exception):
    def __init__(self, status: int | None, message: str):
        self.status = status
        self.message = message
        if status is None:
            super().__init__(message)
        else:
            super().__init__(f"HTTP {status}: {message}")
