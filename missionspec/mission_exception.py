from enum import IntEnum, auto


class MissionErrorCode(IntEnum):
    MISSION_BAD_ROLE_REQUEST = auto()
    MISSION_BAD_VIDEO_REQUEST = auto()
    MISSION_SCHEMA_VIOLATION = auto()


class MissionException(RuntimeError):
    def __init__(self, message: str, code: MissionErrorCode):
        super().__init__(message)
        self.code = code

    def getMessage(self) -> str:
        return str(self)

    def getMissionErrorCode(self) -> MissionErrorCode:
        return self.code


class SchemaViolation(MissionException):
    """Raised when mission XML does not conform to the mission schema.

    details holds the list of errors reported by the validator.
    """
    def __init__(self, message: str, details=None):
        super().__init__(message, MissionErrorCode.MISSION_SCHEMA_VIOLATION)
        self.details = list(details) if details is not None else []


class IndexOutOfRange(MissionException, IndexError):
    def __init__(self, message: str):
        super().__init__(message, MissionErrorCode.MISSION_BAD_ROLE_REQUEST)


class NotConfigured(MissionException):
    def __init__(self, message: str):
        super().__init__(message, MissionErrorCode.MISSION_BAD_VIDEO_REQUEST)
