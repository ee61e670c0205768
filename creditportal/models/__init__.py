from .consultation import Consultation  # noqa: F401
from .contact_submission import ContactSubmission  # noqa: F401
from .credit_progress import CreditProgress  # noqa: F401
