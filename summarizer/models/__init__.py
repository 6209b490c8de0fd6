from .transcript import Transcript
from .summary import Summary
from .email_log import EmailLog
