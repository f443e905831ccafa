"""rulechain — declarative per-field rule-chain validation for structured records."""

__version__ = "1.0.0"

# Load the validators package before config so config can import ResultMode
from rulechain.validators import ValidationEngine, validate  # noqa: E402,F401
