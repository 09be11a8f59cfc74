from tachoid.app.tacho.session import list_readers, session

__all__ = ["list_readers", "session"]
