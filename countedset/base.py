import logging

logger = logging.getLogger(__name__)


class CountedSetError(ValueError):
    pass


def check_count(value, name="count"):
    '''
    Validate that `value` can be stored as an occurrence count or
    capacity hint.

    Parameters
    ----------
    value: int
        The candidate value
    name: str, optional
        Used to describe `value` in the error message

    Returns
    -------
    int

    Raises
    ------
    CountedSetError:
        If `value` is not a non-negative integer
    '''
    if isinstance(value, bool) or not isinstance(value, int):
        logger.debug("Rejected %s %r of type %s", name, value, type(value).__name__)
        raise CountedSetError("{} must be an integer, not {!r}".format(name, value))
    if value < 0:
        logger.debug("Rejected negative %s %r", name, value)
        raise CountedSetError("{} must not be negative, got {}".format(name, value))
    return value


def format_counts(counted_set):
    """Render the `element:count` pairs of `counted_set` as a :class:`str`,
    sorted by the `repr` of each element so the output is stable.

    Parameters
    ----------
    counted_set: :class:`~.CountedMultiset`

    Returns
    -------
    :class:`str`
    """
    pairs = sorted(counted_set.items(), key=lambda item: repr(item[0]))
    return '{' + ', '.join("%r:%d" % (k, v) for k, v in pairs) + '}'
