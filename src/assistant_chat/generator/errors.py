class GenerationError(Exception):
    """Base class for every failure raised while generating a reply."""


class NoUserMessage(GenerationError):
    def __init__(self):
        super().__init__("No user message found.")


class ThreadCreationFailed(GenerationError):
    def __init__(self):
        super().__init__("Failed to create thread")


class MessageSubmissionFailed(GenerationError):
    def __init__(self):
        super().__init__("Failed to add message to thread")


class RunCreationFailed(GenerationError):
    def __init__(self):
        super().__init__("Failed to create run")


class StatusPollFailed(GenerationError):
    def __init__(self):
        super().__init__("Failed to get run status")


class RunPollTimeout(GenerationError):
    def __init__(self, attempts: int, status: str):
        self.attempts = attempts
        self.status = status
        super().__init__(f"Run still '{status}' after {attempts} status checks")


class UnexpectedRunStatus(GenerationError):
    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Run ended with status: {status}")


class MessageRetrievalFailed(GenerationError):
    def __init__(self):
        super().__init__("Failed to get messages")


class NoTextResponse(GenerationError):
    def __init__(self):
        super().__init__("No valid text response found.")
