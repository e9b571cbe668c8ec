from .session import AuthSession, Stores, UserProfile, Workspace, load_search_collections

__all__ = ["AuthSession", "Stores", "UserProfile", "Workspace", "load_search_collections"]
