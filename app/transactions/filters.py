from django.db.models import Q

from .validators import parse_user_id


def build_transaction_filter(user_id=None, type=None, category=None):
    """
    Combine the supplied parameters into a conjunction of equality predicates.
    Parameters left as None add no constraint.
    """
    predicate = Q()

    user_id = parse_user_id(user_id)
    if user_id is not None:
        predicate &= Q(user_id=user_id)
    if type is not None:
        predicate &= Q(type=type)
    if category is not None:
        predicate &= Q(category=category)

    return predicate
