"""Helper implementations, one module per group.

Each module exposes a ``HELPERS`` dict mapping template names to fail-soft
implementations. Template names follow the catalog (``timeIn``,
``humanizeSize``); Python names are snake_case and avoid shadowing
builtins (``slice`` is ``slice_value``).

- strings.py    - casing, padding, truncation, pluralize
- numbers.py    - intcomma, ordinal, filesizeformat, arithmetic
- sequences.py  - default, length, first/last, slice, random
- times.py      - timeIn, duration, renderTime, timeago
- query.py      - getQuery, setQuery, delQuery, parseUrl
- safe.py       - asHTML and friends, tojson, markdown
- identity.py   - ObjectID formatting and comparison
"""
