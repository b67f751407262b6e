from __future__ import annotations


class RoomError(Exception):
    """Base for registry failures. `code` is the stable API error string."""

    code = "room_error"
    status = 400

    def __init__(self, room_code: str = "", message: str | None = None) -> None:
        self.room_code = room_code
        if message is None:
            message = f"{self.code}: {room_code}" if room_code else self.code
        super().__init__(message)


class RoomNotFound(RoomError):
    code = "room_not_found"
    status = 404


class RoomFull(RoomError):
    code = "room_full"
    status = 409


class RoomNotReady(RoomError):
    """The room is still waiting for its second player."""

    code = "room_not_ready"
    status = 409


class CodeGenerationExhausted(RoomError):
    code = "code_generation_exhausted"
    status = 500


class RegistryBusy(RoomError):
    """A writer gave up waiting for the registry lock."""

    code = "registry_busy"
    status = 503
