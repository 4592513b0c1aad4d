"""Startup orchestration: session state defaults and the one-time session restore."""

import logging
from dataclasses import dataclass
from typing import Literal, Tuple

from utils import session_manager

log = logging.getLogger(__name__)

StartupStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class StartupResult:
    """Result contract for startup/bootstrap orchestration."""

    status: StartupStatus
    planned_steps: Tuple[str, ...]


def run_startup() -> StartupResult:
    """Restore runs once per tab; later reruns only reconcile with the store."""
    executed_steps = []

    session_manager.init_session_state()
    executed_steps.append("init_session_state")

    controller = session_manager.get_controller()
    executed_steps.append("get_controller")

    if not session_manager.st.session_state.session_restored:
        try:
            controller.restore()
            executed_steps.append("restore_session")
        except Exception as e:
            # restore() has already cleared the loading flag; the tab continues logged out.
            log.error(f"Session restore failed, continuing unauthenticated: {e}", exc_info=True)
            executed_steps.append("restore_session_failed")
        session_manager.st.session_state.session_restored = True
    else:
        controller.sync_with_store()
        executed_steps.append("sync_with_store")

    return StartupResult(status="CONTINUE", planned_steps=tuple(executed_steps))
