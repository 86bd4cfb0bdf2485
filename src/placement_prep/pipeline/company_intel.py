"""Company Intel: size / industry / focus from substring heuristics on the name."""

from __future__ import annotations

import logging

from placement_prep.errors import InvalidInputError
from placement_prep.models.analysis import CompanyIntel

logger = logging.getLogger(__name__)

KNOWN_ENTERPRISES: tuple[str, ...] = (
    # global tech
    "google", "amazon", "facebook", "meta", "apple", "netflix", "microsoft",
    # IT services
    "tcs", "infosys", "wipro", "accenture", "cognizant", "capgemini",
    # investment banks
    "jpmorgan", "goldman sachs", "morgan stanley",
    "adobe", "salesforce", "oracle", "ibm", "cisco", "intel", "nvidia",
    "uber", "airbnb", "stripe",
    # Big 4
    "deloitte", "pwc", "ey", "kpmg",
)

DEFAULT_INDUSTRY = "Technology"
STARTUP_FOCUS = "Rapid feature development, Full-stack ownership, Practical problem solving"
ENTERPRISE_FOCUS = "Scalability, System Design, Core CS fundamentals, Optimization"
FINTECH_INDUSTRY = "FinTech / Banking"
FINTECH_FOCUS = "Security, Transaction consistency, High availability"

DEFAULT_INTEL = CompanyIntel(size="Startup", industry=DEFAULT_INDUSTRY, focus=STARTUP_FOCUS)


def classify_company(company_name: str | None) -> CompanyIntel:
    """Classify an employer by name. First matching rule wins.

    Plain substring tests, so short entries like ``"ey"`` also match inside
    longer names.
    """
    if company_name is None:
        return DEFAULT_INTEL
    if not isinstance(company_name, str):
        raise InvalidInputError(
            f"Company name must be a string, got {type(company_name).__name__}"
        )

    name = company_name.strip().lower()
    if not name:
        return DEFAULT_INTEL

    if any(known in name for known in KNOWN_ENTERPRISES):
        intel = CompanyIntel(size="Enterprise", industry=DEFAULT_INDUSTRY, focus=ENTERPRISE_FOCUS)
    elif "bank" in name or "financial" in name:
        intel = CompanyIntel(size="Enterprise", industry=FINTECH_INDUSTRY, focus=FINTECH_FOCUS)
    elif "startup" in name:
        intel = CompanyIntel(size="Startup", industry=DEFAULT_INDUSTRY, focus=STARTUP_FOCUS)
    else:
        intel = DEFAULT_INTEL

    logger.debug("Classified company %r as %s / %s", company_name, intel.size, intel.industry)
    return intel
