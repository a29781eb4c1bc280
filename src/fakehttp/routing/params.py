"""Path parameter converters.

Built-in segment shapes for route placeholders like ``{id:int}``.
Captured values are always handed to handlers as strings; the converter
only restricts what a segment may look like.
"""


# regex fragment for each supported converter
CONVERTERS: dict[str, str] = {
    "str": r"[^/]+",
    "int": r"\d+",
    "float": r"\d+(?:\.\d+)?",
    "path": r".+",
}


def converter_regex(param_type: str) -> str:
    """Return the regex fragment for *param_type*.

    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    return CONVERTERS[param_type]
