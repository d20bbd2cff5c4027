"""Element node of the lightdom tree.

An :class:`Element` owns its children and keeps only a weak reference to its
parent, so a tree never holds itself alive through back-references.

Lookups by name never raise and never return ``None``. A miss produces an
*error element*: an ordinary :class:`Element` named :data:`ERROR_ELEMENT_NAME`
whose value describes what was not found. Any lookup on an error element
returns the error element itself, so chains such as
``doc.root.child("a").child("b").child("c")`` are always safe; callers check
``is_error`` (or compare the name) at the end of the chain.

Serialization reproduces attribute values and text verbatim. Characters such
as ``<``, ``&`` and ``"`` are NOT escaped, so values containing them produce
malformed XML.
"""

import re
import weakref
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

ERROR_ELEMENT_NAME = "LightDOMError"

_INTEGER_PATTERN = re.compile(r"[+-]?\d+\Z")
_FLOAT_PREFIX_PATTERN = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_FORMATTING_CHARACTERS = str.maketrans("", "", "\n\t")


def error_element(message: str) -> "Element":
    """Create a fresh error element carrying ``message`` as its value."""
    return Element(ERROR_ELEMENT_NAME, value=message)


def _parse_int(text: str) -> Optional[int]:
    if _INTEGER_PATTERN.match(text):
        return int(text)
    return None


class Element:
    """A single node in the document tree.

    Args:
        name: Tag name, not validated against XML naming rules
        value: Optional text content
        attributes: Initial attributes; values are stored as strings
    """

    def __init__(
        self,
        name: str,
        value: Optional[str] = None,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> None:
        if not name:
            raise ValueError("Element name cannot be empty")

        self._name = name
        self.value = value
        self.attributes: Dict[str, str] = {}
        self.children: List["Element"] = []
        self.namespace_uri: Optional[str] = None
        self._parent_ref: Optional["weakref.ReferenceType[Element]"] = None

        if attributes:
            self.add_attributes(attributes)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, value={self.value!r}, "
            f"attributes={self.attributes!r}, children={len(self.children)})"
        )

    @property
    def name(self) -> str:
        """Tag name, fixed at construction."""
        return self._name

    @property
    def parent(self) -> Optional["Element"]:
        """Owning element, or None for a root, a detached element or a dead parent."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def _set_parent(self, parent: Optional["Element"]) -> None:
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    @property
    def is_error(self) -> bool:
        """Check if this is an error element produced by a failed lookup."""
        return self._name == ERROR_ELEMENT_NAME

    # Scalar views of the text value

    @property
    def string_value(self) -> str:
        return self.value if self.value is not None else ""

    @property
    def bool_value(self) -> bool:
        """True for ``"true"`` in any case or for an integer value of 1."""
        text = self.string_value
        return text.lower() == "true" or _parse_int(text) == 1

    @property
    def int_value(self) -> int:
        """Integer value, 0 when the text is not an integer."""
        parsed = _parse_int(self.string_value)
        return parsed if parsed is not None else 0

    @property
    def double_value(self) -> float:
        """Float parsed from the leading numeric part of the text, else 0.0."""
        match = _FLOAT_PREFIX_PATTERN.match(self.string_value)
        if match is None:
            return 0.0
        return float(match.group())

    # Lookup

    def child(self, key: str) -> "Element":
        """Return the first child named ``key``.

        Returns a new error element when there is no such child, and ``self``
        when called on an error element.
        """
        if self.is_error:
            return self
        for candidate in self.children:
            if candidate.name == key:
                return candidate
        return error_element(f"element <{key}> not found")

    def __getitem__(self, key: str) -> "Element":
        return self.child(key)

    def __iter__(self) -> Iterator["Element"]:
        # Direct children; the __getitem__ fallback protocol never terminates.
        return iter(self.children)

    @property
    def all(self) -> Optional[List["Element"]]:
        """Siblings sharing this element's name, self included.

        None when the element has no parent.
        """
        parent = self.parent
        if parent is None:
            return None
        return [sibling for sibling in parent.children if sibling.name == self._name]

    @property
    def first(self) -> Optional["Element"]:
        elements = self.all
        return elements[0] if elements else None

    @property
    def last(self) -> Optional["Element"]:
        elements = self.all
        return elements[-1] if elements else None

    @property
    def count(self) -> int:
        elements = self.all
        return len(elements) if elements is not None else 0

    def all_with_attributes(
        self, attr_filter: Mapping[str, Any]
    ) -> Optional[List["Element"]]:
        """Siblings whose attributes contain every pair of ``attr_filter``.

        Attributes not named in the filter are ignored. Filter values are
        compared as strings.

        Returns:
            Matching elements, or None when there is no parent or no match
        """
        elements = self.all
        if elements is None:
            return None

        wanted = {str(key): str(value) for key, value in attr_filter.items()}
        found = [
            element for element in elements
            if all(
                key in element.attributes and element.attributes[key] == value
                for key, value in wanted.items()
            )
        ]
        return found if found else None

    def count_with_attributes(self, attr_filter: Mapping[str, Any]) -> int:
        found = self.all_with_attributes(attr_filter)
        return len(found) if found is not None else 0

    # Mutation

    def add_child(
        self,
        child: Union["Element", str],
        value: Optional[str] = None,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> "Element":
        """Append a child and make this element its parent.

        ``child`` is either an existing element, which is detached from its
        previous parent first, or a name from which a new element is built
        with ``value`` and ``attributes``.

        Returns:
            The added child, for chaining
        """
        if isinstance(child, str):
            child = Element(child, value=value, attributes=attributes)
        elif not isinstance(child, Element):
            raise TypeError("Child must be an Element instance or an element name")

        if child is self or any(ancestor is child for ancestor in self.iter_ancestors()):
            raise ValueError("Element cannot be added to its own subtree")

        previous_parent = child.parent
        if previous_parent is not None:
            previous_parent.remove_child(child)

        child._set_parent(self)
        self.children.append(child)
        return child

    def remove_child(self, child: "Element") -> bool:
        """Remove a child element and clear its parent link."""
        for index, candidate in enumerate(self.children):
            if candidate is child:
                del self.children[index]
                child._set_parent(None)
                return True
        return False

    def remove_from_parent(self) -> None:
        """Detach this element from its parent, if any."""
        parent = self.parent
        if parent is not None:
            parent.remove_child(self)

    def add_attribute(self, key: str, value: Any) -> None:
        """Set an attribute, overwriting any existing value for ``key``."""
        self.attributes[str(key)] = str(value)

    def add_attributes(self, attributes: Mapping[str, Any]) -> None:
        for key, value in attributes.items():
            self.add_attribute(key, value)

    # Navigation

    def iter_ancestors(self) -> Iterator["Element"]:
        """Yield the parent, grandparent and so on up to the root."""
        element = self.parent
        while element is not None:
            yield element
            element = element.parent

    @property
    def depth(self) -> int:
        """Number of ancestors of this element."""
        return sum(1 for _ in self.iter_ancestors())

    def iter_elements(self) -> Iterator["Element"]:
        """Iterate over this element and all descendants in document order."""
        stack = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.children))

    # Serialization

    @property
    def xml_string(self) -> str:
        """Multi-line XML with one tab of indentation per level.

        The indentation is derived from the parent chain, so any element can
        be serialized on its own.
        """
        indent = "\t" * max(self.depth - 1, 0)
        parts = [indent, "<", self._name]
        for key, value in self.attributes.items():
            parts.append(f' {key}="{value}"')

        if self.value is None and not self.children:
            parts.append(" />")
        elif self.children:
            parts.append(">\n")
            for child in self.children:
                parts.append(child.xml_string)
                parts.append("\n")
            parts.append(f"{indent}</{self._name}>")
        else:
            parts.append(f">{self.string_value}</{self._name}>")

        return "".join(parts)

    @property
    def xml_string_compact(self) -> str:
        """``xml_string`` with every newline and tab removed."""
        return self.xml_string.translate(_FORMATTING_CHARACTERS)

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result: Dict[str, Any] = {
            "name": self._name,
            "attributes": dict(self.attributes),
        }

        if self.value is not None:
            result["value"] = self.value

        if self.namespace_uri is not None:
            result["namespace_uri"] = self.namespace_uri

        if self.children:
            result["children"] = [child.to_dict() for child in self.children]

        return result
