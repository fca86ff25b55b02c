from src.skill.router import EventKind, IntentKind, IntentRouter

__all__ = ["EventKind", "IntentKind", "IntentRouter"]
