"""EmailAddress value object for account contact addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from identity.domain import identity

_FORBIDDEN_CHARACTERS = frozenset(' \t\n;,()"<>[]\\')


@identity.value_object
class EmailAddress:
    """A structurally valid email address: one @, a local part, and a dotted domain."""

    address: String(required=True, max_length=254)

    @invariant.post
    def address_must_be_well_formed(self):
        email = self.address or ""

        if email.count("@") != 1 or any(char in _FORBIDDEN_CHARACTERS for char in email):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        local_part, domain_part = email.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if ".." in email:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})
