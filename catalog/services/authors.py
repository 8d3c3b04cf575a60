"""Author lifecycle: listed by family name, blocked from deletion by their books."""

from catalog.models import Author
from catalog.services.lifecycle import RecordLifecycle
from catalog.services.validation import AUTHOR_RULES


class AuthorLifecycle(RecordLifecycle[Author]):
    model = Author
    rules = AUTHOR_RULES
    order_by = [Author.family_name, Author.first_name]
