"""Prompt template rendering for agents.

Templates use single-brace placeholders: "Analyze {stateName} in {flowName}".
"""

import re

# substituted for a leftover {input} placeholder
INPUT_FALLBACK_TEXT = "Please analyze this flow state and provide insights."

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def render_prompt_template(template: str, variables: dict[str, str]) -> str:
    """Substitute {name} placeholders in the template.

    Keys match exactly and case-sensitively. Supplied keys are substituted in
    one scan, so a value is never expanded by another key. Afterwards any
    remaining {input} (including one introduced by a value) becomes
    INPUT_FALLBACK_TEXT unless "input" was supplied. Other unknown
    placeholders are left as is.
    """

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    rendered = _PLACEHOLDER.sub(_replace, template)
    if "input" not in variables:
        rendered = rendered.replace("{input}", INPUT_FALLBACK_TEXT)
    return rendered


def find_placeholders(template: str) -> list[str]:
    """List placeholder names in order of first appearance."""
    names: list[str] = []
    for match in _PLACEHOLDER.finditer(template):
        if match.group(1) not in names:
            names.append(match.group(1))
    return names
