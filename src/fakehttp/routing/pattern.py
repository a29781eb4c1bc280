"""Path templates: parsing, matching, and specificity scoring.

A ``Pattern`` is parsed once into an immutable tuple of ``PathSegment``
and compiled to a single anchored regex. Matching is structural only.
"""

import re
from dataclasses import dataclass, field
from urllib.parse import unquote

from fakehttp.errors import PatternError
from fakehttp.routing.params import CONVERTERS, converter_regex


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a path template.

    Static:  ``/users``      (is_param=False)
    Param:   ``/:id``        (is_param=True, param_name="id")
    Param:   ``/{id}``       (is_param=True, param_name="id")
    Typed:   ``/{id:int}``   (is_param=True, param_name="id", param_type="int")
    Splat:   ``/*``          (is_param=True, param_name="splat", param_type="path")
    Mixed:   ``/:id.:fmt``   (is_param=True, parts=(":id", ".", ":fmt"))
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"
    parts: tuple["PathSegment", ...] = ()


# placeholders that may appear anywhere inside a segment
_PLACEHOLDER = re.compile(r"\*|:(?P<colon>\w*)|\{(?P<brace>[^{}]*)\}")


def parse_template(template: str) -> tuple[PathSegment, ...]:
    """Parse a path template into segments.

    Examples::

        "/"                  -> ()
        "/users"             -> (PathSegment("users"),)
        "/users/:id"         -> (PathSegment("users"), PathSegment(":id", is_param=True, ...))
        "/users/{id:int}"    -> (..., PathSegment("{id:int}", is_param=True, param_type="int"))
        "/files/*"           -> (..., PathSegment("*", is_param=True, param_name="splat", ...))
        "/files/*.pdf"       -> (..., PathSegment("*.pdf", is_param=True, parts=(...)))

    A trailing slash yields a final empty static segment, so ``/users/``
    and ``/users`` are different templates.
    """
    if not template.startswith("/"):
        template = "/" + template
    if template == "/":
        return ()

    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in template[1:].split("/"):
        segment = _parse_segment(part, template)
        for param in _params(segment):
            if param.param_name in seen:
                msg = f"Duplicate parameter {param.param_name!r} in pattern {template!r}."
                raise PatternError(msg)
            seen.add(param.param_name)
        segments.append(segment)
    return tuple(segments)


def _params(segment: PathSegment) -> list[PathSegment]:
    if segment.parts:
        return [p for p in segment.parts if p.param_name is not None]
    return [segment] if segment.param_name is not None else []


def _parse_segment(part: str, template: str) -> PathSegment:
    if "<" in part or ">" in part:
        msg = (
            f"Pattern {template!r} uses <param> syntax. "
            "Use :param or {param} placeholders instead."
        )
        raise PatternError(msg)

    tokens: list[PathSegment] = []
    pos = 0
    for found in _PLACEHOLDER.finditer(part):
        if found.start() > pos:
            tokens.append(_parse_literal(part[pos : found.start()], template))
        tokens.append(_parse_placeholder(found, template))
        pos = found.end()
    if pos < len(part) or not tokens:
        tokens.append(_parse_literal(part[pos:], template))

    if len(tokens) == 1:
        return tokens[0]
    return PathSegment(value=part, is_param=True, parts=tuple(tokens))


def _parse_literal(text: str, template: str) -> PathSegment:
    if "{" in text or "}" in text:
        msg = f"Unbalanced brace in pattern {template!r}, got {text!r}."
        raise PatternError(msg)
    return PathSegment(value=text)


def _parse_placeholder(found: re.Match[str], template: str) -> PathSegment:
    text = found.group()
    if text == "*":
        return PathSegment(value=text, is_param=True, param_name="splat", param_type="path")

    if found.group("colon") is not None:
        name, param_type = found.group("colon"), "str"
    else:
        name, _, param_type = found.group("brace").partition(":")
        param_type = param_type or "str"

    if not name.isidentifier():
        msg = f"Invalid parameter name {name!r} in pattern {template!r}."
        raise PatternError(msg)
    if name == "splat":
        msg = f"Parameter name 'splat' is reserved for '*' in pattern {template!r}."
        raise PatternError(msg)
    if param_type not in CONVERTERS:
        known = ", ".join(sorted(CONVERTERS))
        msg = f"Unknown converter {param_type!r} in pattern {template!r}. Known: {known}."
        raise PatternError(msg)
    return PathSegment(value=text, is_param=True, param_name=name, param_type=param_type)


def _fragment(seg: PathSegment, *, inline: bool = False) -> str:
    if seg.parts:
        return "".join(_fragment(part, inline=True) for part in seg.parts)
    if not seg.is_param:
        return re.escape(seg.value)
    if seg.value == "*":
        return r"(?P<splat>.*?)"
    regex = converter_regex(seg.param_type)
    if inline and seg.param_type == "str":
        # lazy, so trailing literals like ".json" stay outside the capture
        regex = r"[^/]+?"
    return f"(?P<{seg.param_name}>{regex})"


def _compile(segments: tuple[PathSegment, ...]) -> re.Pattern[str]:
    if not segments:
        return re.compile(r"^/$")
    return re.compile("^/" + "/".join(_fragment(seg) for seg in segments) + "$")


@dataclass(frozen=True, slots=True)
class Pattern:
    """An immutable, compiled path template.

    Usage::

        pattern = Pattern("/users/:id")
        pattern.match("/users/42")   # {"id": "42"}
        pattern.score("/users/42")   # 1
        pattern.match("/orders/42")  # None
    """

    template: str
    segments: tuple[PathSegment, ...] = field(init=False, repr=False, compare=False)
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        segments = parse_template(self.template)
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "_regex", _compile(segments))

    def __str__(self) -> str:
        return self.template

    @property
    def param_names(self) -> tuple[str, ...]:
        """Names of the placeholders, in template order."""
        return tuple(p.param_name for s in self.segments for p in _params(s))

    def match(self, path: str) -> dict[str, str] | None:
        """Return the parameter binding for *path*, or ``None`` on mismatch.

        Captured values are percent-decoded.
        """
        found = self._regex.match(path or "/")
        if found is None:
            return None
        return {name: unquote(value) for name, value in found.groupdict().items()}

    def score(self, path: str) -> int | None:
        """Specificity score for *path*: the number of parameters bound.

        Lower is more specific; a fully literal pattern scores 0.
        Returns ``None`` when *path* does not match.
        """
        params = self.match(path)
        if params is None:
            return None
        return len(params)
