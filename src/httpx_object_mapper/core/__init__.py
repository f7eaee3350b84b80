"""Core building blocks shared by sync and async clients."""

__all__: list[str] = []
