"""Signed-in user state and the per-user collections loaded for it."""

import threading
from dataclasses import dataclass, field
from typing import Callable, Optional

import structlog

from checkmate import TodoListStore
from checkmate.models import TodoList
from enrichment import EnrichmentService
from goals import Goal, GoalStore
from journal import JournalEntry, JournalStore
from search import SearchCollections, SearchPalette
from stash import StashItem, StashStore

logger = structlog.get_logger()

DEFAULT_TIP_CONTEXT = "Software engineer working on a SaaS product"
LOADING_TIP = "Loading insight..."


@dataclass(frozen=True)
class UserProfile:
    uid: str
    display_name: str = "User"
    email: str = ""
    photo_url: str = ""


AuthListener = Callable[[Optional[UserProfile]], None]


class AuthSession:
    """Current user plus change notification.

    Listeners are called with the new profile (None after logout), and once
    immediately on subscribe with the current state.
    """

    def __init__(self):
        self._user: Optional[UserProfile] = None
        self._listeners: list[AuthListener] = []
        self._lock = threading.Lock()

    @property
    def user(self) -> Optional[UserProfile]:
        return self._user

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)
            current = self._user
        listener(current)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def login(self, profile: UserProfile) -> None:
        logger.info("auth.login", user_id=profile.uid)
        self._set(profile)

    def logout(self) -> None:
        if self._user:
            logger.info("auth.logout", user_id=self._user.uid)
        self._set(None)

    def rehydrate(self, profile: Optional[UserProfile]) -> None:
        """Restore a persisted session (e.g. a still-valid token)."""
        self._set(profile)

    def _set(self, profile: Optional[UserProfile]) -> None:
        with self._lock:
            self._user = profile
            listeners = list(self._listeners)
        for listener in listeners:
            listener(profile)


@dataclass
class Stores:
    goals: GoalStore
    todo_lists: TodoListStore
    journal: JournalStore
    stash: StashStore


@dataclass
class UserCollections:
    goals: list[Goal] = field(default_factory=list)
    todo_lists: list[TodoList] = field(default_factory=list)
    journal_entries: list[JournalEntry] = field(default_factory=list)
    stash_items: list[StashItem] = field(default_factory=list)


def load_collections(stores: Stores, user_id: str) -> UserCollections:
    return UserCollections(
        goals=stores.goals.list_goals(user_id),
        todo_lists=stores.todo_lists.list_todo_lists(user_id),
        journal_entries=stores.journal.list_entries(user_id),
        stash_items=stores.stash.list_items(user_id),
    )


def load_search_collections(stores: Stores, user_id: str) -> SearchCollections:
    """Fresh search snapshot for one user, read straight from the stores."""
    data = load_collections(stores, user_id)
    return SearchCollections.of(
        goals=data.goals,
        todo_lists=data.todo_lists,
        journal_entries=data.journal_entries,
        stash_items=data.stash_items,
    )


class Workspace:
    """The signed-in user's collections, tip and search palette.

    Follows an AuthSession: loads everything on login, clears on logout.
    """

    def __init__(
        self,
        stores: Stores,
        session: AuthSession,
        enrichment: Optional[EnrichmentService] = None,
        navigate: Optional[Callable[[str], None]] = None,
        focus_input: Optional[Callable[[], None]] = None,
        tip_context: str = DEFAULT_TIP_CONTEXT,
    ):
        self.stores = stores
        self.enrichment = enrichment or EnrichmentService()
        self.tip_context = tip_context
        self._navigate = navigate or (lambda path: None)
        self._data = UserCollections()
        self._snapshot = SearchCollections()
        self.user: Optional[UserProfile] = None
        self.tip = LOADING_TIP
        self.palette = SearchPalette(
            collections=lambda: self._snapshot,
            navigate=self._navigate,
            focus_input=focus_input,
        )
        self._unsubscribe = session.subscribe(self._on_auth_change)

    # --- Collections ---

    @property
    def goals(self) -> list[Goal]:
        return self._data.goals

    @property
    def todo_lists(self) -> list[TodoList]:
        return self._data.todo_lists

    @property
    def journal_entries(self) -> list[JournalEntry]:
        return self._data.journal_entries

    @property
    def stash_items(self) -> list[StashItem]:
        return self._data.stash_items

    def search_collections(self) -> SearchCollections:
        """Snapshot of the loaded collections; same object until data changes."""
        return self._snapshot

    def reload(self) -> None:
        """Re-read every collection for the current user."""
        if not self.user:
            return
        uid = self.user.uid
        self._data = load_collections(self.stores, uid)
        self._refresh_snapshot()
        logger.info(
            "workspace.loaded",
            user_id=uid,
            goals=len(self._data.goals),
            todo_lists=len(self._data.todo_lists),
            journal_entries=len(self._data.journal_entries),
            stash_items=len(self._data.stash_items),
        )

    def _refresh_snapshot(self) -> None:
        self._snapshot = SearchCollections.of(
            goals=self._data.goals,
            todo_lists=self._data.todo_lists,
            journal_entries=self._data.journal_entries,
            stash_items=self._data.stash_items,
        )

    # --- Auth ---

    def _on_auth_change(self, profile: Optional[UserProfile]) -> None:
        was_signed_in = self.user is not None
        self.user = profile
        if profile:
            self.tip = self.enrichment.tip(self.tip_context)
            self.reload()
            self._navigate("/dashboard")
        else:
            self._data = UserCollections()
            self._refresh_snapshot()
            self.tip = LOADING_TIP
            self.palette.dismiss()
            self.palette.set_query("")
            if was_signed_in:
                self._navigate("/")

    def close(self) -> None:
        self._unsubscribe()
