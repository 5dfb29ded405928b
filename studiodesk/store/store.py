"""Store that applies actions, persists touched collections and runs hooks."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable, List, Optional

from studiodesk.auth.gate import InvalidCredentialsError, authenticate
from studiodesk.core.config import AppConfig
from studiodesk.core.models import Quotation, SessionUser
from studiodesk.core.state import SESSION_KEY, AppState
from studiodesk.quoting.draft import QuotationDraft
from studiodesk.storage.backend import JsonFileStore
from studiodesk.storage.repository import Repository
from studiodesk.store import actions as a
from studiodesk.store.notifications import Notifier
from studiodesk.store.reducer import reduce

logger = logging.getLogger(__name__)

MutationHook = Callable[[a.Action, AppState, AppState], None]


def log_mutation(action: a.Action, before: AppState, after: AppState) -> None:
    """Default hook: one log line per applied action."""

    changed = [
        key
        for key in action.collections
        if key != SESSION_KEY and before.collection(key) != after.collection(key)
    ]
    if changed:
        logger.info("%s updated %s", type(action).__name__, ", ".join(changed))
    else:
        logger.debug("%s left the collections unchanged", type(action).__name__)


class Store:
    """Single owner of the application state.

    Every dispatch is a pure ``reduce`` followed by a full snapshot write of
    each collection the action changed. Mutation hooks receive
    ``(action, before, after)`` and are the place to record audit entries.
    """

    def __init__(
        self,
        repository: Repository,
        state: Optional[AppState] = None,
        notifier: Optional[Notifier] = None,
        hooks: Optional[Iterable[MutationHook]] = None,
    ) -> None:
        self.repository = repository
        self.state = state if state is not None else repository.load()
        self.notifier = notifier or Notifier()
        self.hooks: List[MutationHook] = list(hooks) if hooks is not None else [log_mutation]

    @classmethod
    def open(cls, config: Optional[AppConfig] = None) -> "Store":
        """Open a file-backed store described by ``config`` (or the environment)."""

        config = config or AppConfig.from_env()
        repository = Repository(JsonFileStore(config.data_dir, config.storage_prefix))
        state = replace(repository.load(), agency=config.agency)
        logger.info("Opened store at %s", config.data_dir)
        return cls(repository, state=state, notifier=Notifier(ttl=config.notification_ttl))

    def subscribe(self, hook: MutationHook) -> None:
        self.hooks.append(hook)

    def dispatch(self, action: a.Action) -> AppState:
        before = self.state
        after = reduce(before, action)
        # state only advances once storage has accepted the write
        self._persist(action, before, after)
        self.state = after
        for hook in self.hooks:
            hook(action, before, after)
        notice = action.notice(after)
        if notice:
            self.notifier.push(*notice)
        return after

    def login(self, username: str, password: str) -> SessionUser:
        try:
            user = authenticate(username, password)
        except InvalidCredentialsError as exc:
            self.notifier.push(str(exc), "error")
            raise
        self.dispatch(a.Login(user))
        return user

    def logout(self) -> None:
        self.dispatch(a.Logout())

    def save_quotation(self, draft: QuotationDraft, status: str = "Draft") -> Quotation:
        """Finalize a draft and add it, or replace the quotation it was opened from."""

        try:
            quotation = draft.finalize(self.state.clients, status=status)
        except ValueError as exc:
            self.notifier.push(str(exc), "error")
            raise
        if draft.editing_id:
            self.dispatch(a.EditQuotation(quotation))
        else:
            self.dispatch(a.AddQuotation(quotation))
        return quotation

    def _persist(self, action: a.Action, before: AppState, after: AppState) -> None:
        for key in action.collections:
            if key == SESSION_KEY:
                if after.session is None:
                    self.repository.clear_session()
                else:
                    self.repository.save_session(after.session)
            elif before.collection(key) != after.collection(key):
                self.repository.save_all(key, after.collection(key))
