"""Description trees produced by evaluating conditions.

Evaluating a condition yields an :class:`EvaluationResult`: the boolean
outcome plus a :class:`DescriptionNode` tree mirroring the shape of the
condition tree. Each node records the condition's label, whether it passed
on *this* evaluation, an optional rendering of the actual value (only on
failure) and the nodes of its children in construction order.

Nodes are frozen pydantic models. They can be rendered to the indented
``[✓]``/``[✗]`` text used in assertion messages, or dumped to dicts, JSON
or YAML for tooling that wants the raw tree.

Examples:
    >>> result = customer_condition.evaluate(customer)
    >>> print(result.node.render())
    [✗] customer:[
       [✓] first name: 'John',
       [✗] town: 'London' but was: 'Manchester'
    ]
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Status(str, Enum):
    """Outcome of one node in one evaluation.

    UNKNOWN marks a static description that was not evaluated, such as the
    requirement shown under ``contains``.
    """

    UNKNOWN = "unknown"
    PASSED = "passed"
    FAILED = "failed"

    @classmethod
    def of(cls, matched: bool) -> "Status":
        """Map a boolean outcome to PASSED or FAILED."""
        return cls.PASSED if matched else cls.FAILED


class RenderSettings(BaseModel):
    """Options controlling :meth:`DescriptionNode.render`.

    Attributes:
        indent: Spaces added per nesting level.
        passed_marker: Prefix for nodes that passed.
        failed_marker: Prefix for nodes that failed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: int = Field(default=3, ge=0)
    passed_marker: str = "[✓]"
    failed_marker: str = "[✗]"

    def marker(self, status: Status) -> str | None:
        """Return the marker for `status`, or None for UNKNOWN."""
        if status is Status.PASSED:
            return self.passed_marker
        if status is Status.FAILED:
            return self.failed_marker
        return None


DEFAULT_RENDER_SETTINGS = RenderSettings()


class DescriptionNode(BaseModel):
    """One node of a rendered diagnostic tree.

    Attributes:
        label: Static description of the condition, e.g. ``"first name: 'John'"``.
        status: Outcome of this node for the evaluation that produced it.
        detail: Rendering of the actual value. Only set when the node failed.
        children: Nodes of child conditions in construction order. Empty for
            leaves; a group with no children still renders as a group.
        group: Whether this node renders as a bracketed group.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str
    status: Status = Status.UNKNOWN
    detail: str | None = None
    children: tuple["DescriptionNode", ...] = ()
    group: bool = False

    @property
    def passed(self) -> bool:
        return self.status is Status.PASSED

    @property
    def failed(self) -> bool:
        return self.status is Status.FAILED

    def failed_leaves(self) -> list["DescriptionNode"]:
        """Return the deepest failed nodes under this node, depth first.

        A failed group with no failed children (``contains``, an empty
        ``any of``) counts as a leaf itself.
        """
        leaves: list[DescriptionNode] = []
        for child in self.children:
            leaves.extend(child.failed_leaves())
        if not leaves and self.failed:
            return [self]
        return leaves

    def render(self, settings: RenderSettings | None = None) -> str:
        """Render the tree as indented text.

        Args:
            settings: Rendering options. Defaults to DEFAULT_RENDER_SETTINGS.

        Returns:
            The multi-line text representation, without a trailing newline.
        """
        settings = settings or DEFAULT_RENDER_SETTINGS
        return "\n".join(self._render_lines(settings, 0))

    def _render_lines(self, settings: RenderSettings, depth: int) -> list[str]:
        pad = " " * (settings.indent * depth)
        marker = settings.marker(self.status)
        head = f"{pad}{marker} {self.label}" if marker else f"{pad}{self.label}"

        if not self.group:
            if self.detail:
                head = f"{head} {self.detail}"
            return [head]

        lines = [f"{head}:["]
        for i, child in enumerate(self.children):
            child_lines = child._render_lines(settings, depth + 1)
            if i < len(self.children) - 1:
                child_lines[-1] += ","
            lines.extend(child_lines)
        lines.append(f"{pad}]")
        return lines

    def model_dump_yaml(self, **yaml_kwargs: Any) -> str:
        """Dump the tree to a YAML string.

        Args:
            **yaml_kwargs: Additional arguments passed to yaml.dump.

        Raises:
            RuntimeError: If PyYAML is not installed.
        """
        try:
            import yaml
        except ImportError as e:
            raise RuntimeError(
                "PyYAML is required for YAML serialization. "
                "Install it with: pip install pyyaml"
            ) from e

        data = self.model_dump(mode="json")
        return yaml.dump(data, sort_keys=False, allow_unicode=True, **yaml_kwargs)

    def __str__(self) -> str:
        return self.render()


DescriptionNode.model_rebuild()


class EvaluationResult(BaseModel):
    """Outcome of evaluating a condition tree against one value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    matched: bool
    node: DescriptionNode

    def render(self, settings: RenderSettings | None = None) -> str:
        """Render the description tree."""
        return self.node.render(settings)

    def __bool__(self) -> bool:
        return self.matched
