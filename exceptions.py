# exceptions.py
"""
Error taxonomy for the dormitory backend.

Business-rule errors are expected outcomes: each carries a human-readable
message and the HTTP status the transport layer answers with. Infrastructure
failures are reported as Unavailable so clients can tell "retry later" apart
from "fix your input".
"""
from fastapi import status


class DormError(Exception):
     """Base class for all errors surfaced to API callers."""

     status_code = status.HTTP_400_BAD_REQUEST

     def __init__(self, message: str):
          self.message = message
          super().__init__(message)

     @property
     def kind(self) -> str:
          return self.__class__.__name__


class NotFound(DormError):
     status_code = status.HTTP_404_NOT_FOUND

     @classmethod
     def entity(cls, name: str, entity_id) -> "NotFound":
          return cls(f"{name} with ID {entity_id} not found")


class RoomUnavailable(DormError):
     """Target room is under maintenance."""
     status_code = status.HTTP_409_CONFLICT


class RoomFull(DormError):
     status_code = status.HTTP_409_CONFLICT


class RoomOccupied(DormError):
     """Room still has occupants (maintenance request or delete)."""
     status_code = status.HTTP_409_CONFLICT


class InvalidCapacity(DormError):
     status_code = status.HTTP_400_BAD_REQUEST


class InvalidStay(DormError):
     """Check-out date before check-in date."""
     status_code = status.HTTP_400_BAD_REQUEST


class DuplicateKey(DormError):
     status_code = status.HTTP_409_CONFLICT


class ConstraintViolation(DormError):
     """A write rejected by a database constraint other than uniqueness."""
     status_code = status.HTTP_409_CONFLICT


class BuildingInUse(DormError):
     status_code = status.HTTP_409_CONFLICT


class LastAdmin(DormError):
     status_code = status.HTTP_409_CONFLICT


class Unauthorized(DormError):
     status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(DormError):
     status_code = status.HTTP_403_FORBIDDEN


class Unavailable(DormError):
     status_code = status.HTTP_503_SERVICE_UNAVAILABLE
