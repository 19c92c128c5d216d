"""
Unit tests for element descriptors.
"""

import pytest
from selenium.webdriver.common.by import By

from pageobject.automation.element import DropDownOption, Element, Placeholders
from pageobject.automation.interfaces import DropDownValue, PageElement, PlaceholdersProvider


class TestElement:
    """Test suite for Element."""

    def test_get_by_without_placeholders(self):
        """Test a fixed locator is returned unchanged."""
        element = Element(By.ID, "email")

        assert element.get_by() == (By.ID, "email")

    def test_get_by_with_placeholders(self):
        """Test placeholders are substituted in order."""
        element = Element.xpath("//tr[{0}]/td[{1}]")

        assert element.get_by("2", "5") == (By.XPATH, "//tr[2]/td[5]")

    def test_get_by_is_deterministic(self):
        """Test the same placeholders always give the same locator."""
        element = Element.css("li:nth-child({0}) > a")

        assert element.get_by("3") == element.get_by("3")

    def test_get_by_repeated_placeholder(self):
        """Test a placeholder can be used more than once."""
        element = Element.xpath("//label[text()='{0}']/../input[@name='{0}']")

        assert element.get_by("qty") == (
            By.XPATH, "//label[text()='qty']/../input[@name='qty']"
        )

    def test_get_by_escaped_braces(self):
        """Test escaped braces become literal braces."""
        element = Element.css("div[data-json='{{}}']")

        assert element.get_by() == (By.CSS_SELECTOR, "div[data-json='{}']")

    def test_get_by_too_few_placeholders(self):
        """Test a missing placeholder is a ValueError."""
        element = Element.xpath("//tr[{0}]/td[{1}]")

        with pytest.raises(ValueError, match="needs more placeholders"):
            element.get_by("2")

    def test_get_by_template_without_placeholders(self):
        """Test a template called with no placeholders is a ValueError."""
        element = Element.xpath("//tr[{0}]/td[{1}]")

        with pytest.raises(ValueError, match="needs more placeholders"):
            element.get_by()

    def test_get_by_unescaped_braces_without_placeholders(self):
        """Test bare braces are read as a placeholder, not as text."""
        element = Element.css("div[data-json='{}']")

        with pytest.raises(ValueError, match="needs more placeholders"):
            element.get_by()

    def test_get_by_named_field(self):
        """Test a named field is reported like a missing placeholder."""
        element = Element.xpath("//tr[{row}]")

        with pytest.raises(ValueError, match="needs more placeholders"):
            element.get_by("2")

    @pytest.mark.parametrize("factory, strategy", [
        (Element.id, By.ID),
        (Element.name, By.NAME),
        (Element.css, By.CSS_SELECTOR),
        (Element.xpath, By.XPATH),
        (Element.link_text, By.LINK_TEXT),
    ])
    def test_factories(self, factory, strategy):
        """Test convenience constructors pick the locator strategy."""
        element = factory("target")

        assert element.type == strategy
        assert element.expression == "target"

    def test_element_is_immutable(self):
        """Test elements cannot be modified."""
        element = Element.id("email")

        with pytest.raises(AttributeError):
            element.expression = "other"

    def test_element_is_page_element(self):
        """Test Element implements the PageElement interface."""
        assert isinstance(Element.id("email"), PageElement)

    def test_str(self):
        """Test string form names strategy and expression."""
        assert str(Element.id("email")) == "id='email'"


class TestDropDownOption:
    """Test suite for DropDownOption."""

    def test_value(self):
        """Test the visible text is exposed as value."""
        option = DropDownOption("Green")

        assert isinstance(option, DropDownValue)
        assert option.value == "Green"


class TestPlaceholders:
    """Test suite for Placeholders."""

    def test_of(self):
        """Test placeholders keep their order."""
        provider = Placeholders.of("2", "3")

        assert isinstance(provider, PlaceholdersProvider)
        assert provider.placeholders == ("2", "3")

    def test_empty(self):
        """Test the default provider has no placeholders."""
        assert Placeholders().placeholders == ()
