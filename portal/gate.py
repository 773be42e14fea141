# portal/gate.py

# Cosmetic access gate for the portal pages. The password is a plain constant
# compared in process; it hides content, it does not protect it.

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

INCORRECT_PASSWORD_MESSAGE = "❌ Incorrect password"


@dataclass
class GateState:
    content_visible: bool = False
    error: str = ""

    @property
    def error_visible(self) -> bool:
        return bool(self.error)


class AccessGate:
    def __init__(self, expected: str, state: GateState = None):
        self.expected = expected
        self.state = state if state is not None else GateState()

    def attempt(self, entered) -> GateState:
        entered = entered.strip() if isinstance(entered, str) else ""
        if entered == self.expected:
            self.state.content_visible = True
            self.state.error = ""
        else:
            logger.info("Access gate rejected a password attempt")
            self.state.error = INCORRECT_PASSWORD_MESSAGE
        return self.state
