from typing import Optional

from webex_poster.controller import WebexController
from webex_poster.session import Session
from webex_poster.store import PreferenceStore

_controller: Optional[WebexController] = None


def get_controller() -> WebexController:
    global _controller
    if _controller is None:
        _controller = WebexController(Session.restore(PreferenceStore()))
    return _controller
