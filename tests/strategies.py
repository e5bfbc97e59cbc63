"""Hypothesis strategies for texted values."""

from hypothesis import strategies as st

from texted.types.value import List, Number, String, Symbol

symbols = st.from_regex(r"[a-z][a-z0-9-]{0,8}", fullmatch=True).map(Symbol)
strings = st.text(max_size=20).map(String)
numbers = st.floats(allow_nan=False, allow_infinity=False).map(Number)
ints = st.integers(min_value=-10**6, max_value=10**6).map(Number)

atoms = st.one_of(symbols, strings, numbers)

# Any value the S-expression syntax can express
values = st.recursive(atoms, lambda children: st.lists(children, max_size=4).map(List), max_leaves=12)

# Forms the shell syntax can express: flat lists
shell_forms = st.lists(atoms, max_size=5).map(List)

# Forms the JSON syntax can express: symbol head, string/number/nested-form arguments
json_forms = st.recursive(
    st.builds(lambda head, args: List((head, *args)), symbols, st.lists(st.one_of(strings, numbers), max_size=3)),
    lambda children: st.builds(
        lambda head, args: List((head, *args)),
        symbols,
        st.lists(st.one_of(strings, numbers, children), max_size=3),
    ),
    max_leaves=8,
)
