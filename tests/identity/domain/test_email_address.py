import pytest
from identity.shared.email import EmailAddress
from protean.exceptions import ValidationError
from protean.utils import DomainObjects


def test_email_address_element_type():
    assert EmailAddress.element_type == DomainObjects.VALUE_OBJECT


def test_email_address_requires_address():
    with pytest.raises(ValidationError):
        EmailAddress()


@pytest.mark.parametrize(
    "email",
    [
        "user@example.com",
        "user.name@example.com",
        "user+tag@example.com",
        "user@sub.domain.com",
        "a@b.cc",
    ],
    ids=["simple", "dotted_local", "plus_tag", "subdomain", "short"],
)
def test_valid_addresses(email):
    assert EmailAddress(address=email).address == email


@pytest.mark.parametrize(
    "email",
    [
        "plainaddress",
        "two@@example.com",
        "a@b@example.com",
        "@example.com",
        ".user@example.com",
        "user.@example.com",
        "user@localhost",
        "user@.example.com",
        "user@example.com.",
        "user..name@example.com",
        "user@exa..mple.com",
        "us er@example.com",
        "user;x@example.com",
        "<user>@example.com",
    ],
    ids=[
        "no_at",
        "double_at",
        "two_ats",
        "empty_local",
        "leading_dot_local",
        "trailing_dot_local",
        "undotted_domain",
        "leading_dot_domain",
        "trailing_dot_domain",
        "consecutive_dots_local",
        "consecutive_dots_domain",
        "space",
        "semicolon",
        "angle_brackets",
    ],
)
def test_invalid_addresses(email):
    with pytest.raises(ValidationError):
        EmailAddress(address=email)
