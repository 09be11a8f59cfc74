from tachoid.core.base.agent import Agent, Transport
from tachoid.core.base.iso7816 import ISO7816
from tachoid.core.base.message import Message, Result
from tachoid.core.base.terminal import Terminal

__all__ = ["Agent", "ISO7816", "Message", "Result", "Terminal", "Transport"]
