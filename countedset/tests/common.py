import os

import hjson

from countedset import CountedMultiset

here = os.path.dirname(__file__)
fixture_path = os.path.join(here, "data", "fixtures.hjson")


def _load_fixtures(path=fixture_path):
    with open(path, encoding='utf-8') as stream:
        return hjson.load(stream)


fixtures = _load_fixtures()


def build(value):
    if isinstance(value, dict):
        return CountedMultiset.from_counts(value)
    return CountedMultiset(value)


def load(name, *path):
    '''
    Build a fresh :class:`CountedMultiset` from the fixture stored under
    `name`. Mappings are read as element counts, lists as a sequence of
    occurrences. Additional arguments select nested entries.
    '''
    value = fixtures[name]
    for key in path:
        value = value[key]
    return build(value)
