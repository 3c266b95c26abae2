from __future__ import annotations

import atexit
import weakref

import streamlit as st

from healthmon.config.settings import Settings
from healthmon.state.controller import DashboardController

# Live session controllers; entries vanish when their session is dropped.
_controllers: "weakref.WeakSet[DashboardController]" = weakref.WeakSet()


@atexit.register
def stop_all_controllers() -> None:
    for controller in list(_controllers):
        controller.stop()


def ensure_init(settings: Settings) -> DashboardController:
    """Create the session's DashboardController once and start its timers.

    The controller lives in `st.session_state.controller`; later reruns reuse it.
    When the session ends the controller is collected and stops its own timers;
    whatever is still alive at interpreter exit is stopped by stop_all_controllers().
    """
    if "controller" in st.session_state:
        return st.session_state.controller

    controller = DashboardController(settings)
    controller.start()
    _controllers.add(controller)

    st.session_state.controller = controller
    st.session_state.show_all_patients = False
    return controller
