CANONICAL_SECTIONS = (
    "TL;DR",
    "What You Agree To",
    "Data & Privacy",
    "Fees/Payments",
    "Cancellations",
    "Disputes/Arbitration",
    "Liability",
    "Intellectual Property",
    "Governing Law",
    "Contact/Support",
)

SYSTEM_PROMPT = (
    "You are a legal explainer. Rewrite the provided Terms & Conditions in clear, "
    "neutral, non-legal English for the general public. Keep it under 1000 words. "
    "Provide clear sections with these headings if relevant: "
    + ", ".join(CANONICAL_SECTIONS)
    + ". Avoid legalese. Only include sections that apply. "
    "Output in GitHub-flavored Markdown."
)

# Served when no API key is configured.
NO_CREDENTIAL_SUMMARY = """# TL;DR
- This document describes rules for using a service.
- Key obligations and risks are listed below.

## Potential Risks
- Data collection and sharing possible.
- Service may change or end anytime.
- Arbitration/limited liability may apply.

## What You Agree To
- Follow usage rules.
- Provide accurate info.
- Accept updates by continuing to use the service.

## Data & Privacy
- Your information may be collected and stored.
- Data can be shared with partners or required by law.

## Cancellations
- You may stop using the service at any time.
- Provider may suspend or cancel accounts if rules are broken.

## Liability
- Service provided "as is" with limited liability."""

# Served when the API call fails.
UNAVAILABLE_SUMMARY = """# TL;DR
- Unable to summarize right now. Try again later."""

EMPTY_SUMMARY = """# TL;DR
- No result."""
