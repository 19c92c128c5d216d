"""
Concrete element descriptors.

Usage:
    >>> from pageobject.automation.element import Element
    >>> row_cell = Element.xpath("//table[@id='orders']//tr[{0}]/td[{1}]")
    >>> row_cell.get_by("2", "3")
    ('xpath', "//table[@id='orders']//tr[2]/td[3]")

Group the elements of a page in a frozen dataclass, one field per control:

    >>> @dataclass(frozen=True)
    ... class LoginElements:
    ...     email_input: Element = Element.id("email")
    ...     login_button: Element = Element.css("button[type='submit']")
"""

from dataclasses import dataclass
from typing import Tuple

from selenium.webdriver.common.by import By

from .interfaces import DropDownValue, Locator, PageElement, PlaceholdersProvider


@dataclass(frozen=True)
class Element(PageElement):
    """
    Element located by a strategy and an expression template.

    Placeholders use ``str.format`` positional syntax (``{0}``, ``{1}``).
    The expression is always formatted, so literal braces must be escaped
    as ``{{`` and ``}}``.
    """

    type: str
    expression: str

    def get_by(self, *placeholders: str) -> Locator:
        try:
            return (self.type, self.expression.format(*placeholders))
        except (IndexError, KeyError):
            raise ValueError(
                f"Locator '{self.expression}' needs more placeholders "
                f"than given: {list(placeholders)}"
            ) from None

    @classmethod
    def id(cls, expression: str) -> 'Element':
        return cls(By.ID, expression)

    @classmethod
    def name(cls, expression: str) -> 'Element':
        return cls(By.NAME, expression)

    @classmethod
    def css(cls, expression: str) -> 'Element':
        return cls(By.CSS_SELECTOR, expression)

    @classmethod
    def xpath(cls, expression: str) -> 'Element':
        return cls(By.XPATH, expression)

    @classmethod
    def link_text(cls, expression: str) -> 'Element':
        return cls(By.LINK_TEXT, expression)

    def __str__(self) -> str:
        return f"{self.type}='{self.expression}'"


@dataclass(frozen=True)
class DropDownOption(DropDownValue):
    """Dropdown option identified by its visible text."""

    text: str

    @property
    def value(self) -> str:
        return self.text


@dataclass(frozen=True)
class Placeholders(PlaceholdersProvider):
    """Fixed, ordered set of placeholders."""

    values: Tuple[str, ...] = ()

    @classmethod
    def of(cls, *values: str) -> 'Placeholders':
        return cls(tuple(values))

    @property
    def placeholders(self) -> Tuple[str, ...]:
        return self.values
