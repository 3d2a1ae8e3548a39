# SPDX-License-Identifier: Apache-2.0
"""Descriptions of the one-letter feature codes used in GCC's backend table."""

# Key of https://gcc.gnu.org/backends.html, in table column order
FEATURE_DESCRIPTIONS = {
    "H": "a hardware implementation does not exist",
    "M": "a hardware implementation is not currently being manufactured",
    "S": "a free simulator does not exist",
    "L": "integer registers are narrower than 32 bits",
    "Q": "integer registers are at least 64 bits wide",
    "N": "memory is not byte addressable, and/or bytes are not eight bits",
    "F": "floating point arithmetic is not included in the instruction set",
    "I": "architecture does not use IEEE format floating point numbers",
    "C": "architecture does not have a single condition code register",
    "B": "architecture has delay slots",
    "D": "architecture has a stack that grows upward",
    "l": "port cannot use ILP32 mode integer arithmetic",
    "q": "port can use LP64 mode integer arithmetic",
    "r": "port can switch between ILP32 and LP64 at runtime",
    "p": "port uses `define_peephole` (as opposed to `define_peephole2`)",
    "b": 'port uses "* ..." notation for output template code',
    "f": "port does not define prologue and/or epilogue RTL expanders",
    "m": "port does not use `define_constants`",
    "g": "port does not define `TARGET_ASM_FUNCTION_(PRO|EPI)LOGUE`",
    "i": "port generates multiple inheritance thunks using `TARGET_ASM_OUTPUT_MI(_VCALL)_THUNK`",
    "a": "port uses LRA (by default, i.e. unless overridden by a switch)",
    "t": "all instructions either produce exactly one assembly instruction, or trigger a `define_split`",
    "e": "`<arch>-elf` is not a supported target",
    "s": "`<arch>-elf` is the correct target to use with the simulator in `/cvs/src`",
}


def describe_feature(code: str) -> str:
    """Render a feature as ``"<code>: <description>"``.

    Features missing from the legend (e.g. from a user-supplied table) are
    returned unchanged.
    """
    description = FEATURE_DESCRIPTIONS.get(code)
    if description is None:
        return code
    return f"{code}: {description}"
