"""Documentation entries for every builtin, as one static tuple."""

from __future__ import annotations

from texted.documentation.types import ExampleDoc as Ex
from texted.documentation.types import FunctionDoc as Doc
from texted.documentation.types import ParameterDoc as Param

_COUNT = "count"


def _count(what: str) -> Param:
    return Param(_COUNT, "number", f"Number of {what} (default: 1)", optional=True)


MOVEMENT = (
    Doc(
        name="forward-char",
        summary="Move point forward by a number of characters",
        description="Adds COUNT to point. A negative COUNT moves backward. Point is clamped to "
        "the buffer, so it never moves past the end or before the beginning.",
        category="movement",
        parameters=(_count("characters to move"),),
        examples=(
            Ex("Move three characters forward", "forward-char 3; point", "Hello world", "4"),
            Ex("A negative count moves backward", "goto-char 5; forward-char -2; point", "Hello world", "3"),
            Ex("Point stops at the end of the buffer", "forward-char 100; point", "Hello world", "12"),
        ),
        see_also=("backward-char", "forward-word", "goto-char"),
    ),
    Doc(
        name="backward-char",
        summary="Move point backward by a number of characters",
        description="Subtracts COUNT from point, clamping at the beginning of the buffer.",
        category="movement",
        parameters=(_count("characters to move"),),
        examples=(
            Ex("Move two characters back from the end", "end-of-buffer; backward-char 2; point", "Hello world", "10"),
            Ex("Point stops at the beginning", "goto-char 3; backward-char 10; point", "Hello world", "1"),
        ),
        see_also=("forward-char", "backward-word"),
    ),
    Doc(
        name="forward-word",
        summary="Move point forward by a number of words",
        description="For each word, skips characters that are not part of a word and then the "
        "word itself, leaving point just after it. Words are runs of ASCII letters and digits. "
        "A count of zero or less does nothing.",
        category="movement",
        parameters=(_count("words to move"),),
        examples=(
            Ex("Move to the end of the current word", "goto-char 3; forward-word; point", "Hello world test", "6"),
            Ex("Move over two words", "forward-word 2; point", "Hello world test buffer", "12"),
        ),
        see_also=("backward-word", "kill-word", "mark-word"),
    ),
    Doc(
        name="backward-word",
        summary="Move point backward by a number of words",
        description="For each word, skips non-word characters before point and then the word, "
        "leaving point at the word's first character.",
        category="movement",
        parameters=(_count("words to move"),),
        examples=(
            Ex("Move to the start of the current word", "goto-char 15; backward-word; point", "Hello world test", "13"),
            Ex("Move back over two words", "end-of-buffer; backward-word 2; point", "Hello world test", "7"),
        ),
        see_also=("forward-word", "backward-kill-word"),
    ),
    Doc(
        name="beginning-of-line",
        summary="Move point to the beginning of the current line",
        description="Moves point to the first character of the line that contains it.",
        category="movement",
        examples=(
            Ex("Jump to the start of the second line", "goto-char 10; beginning-of-line; point", "first\nsecond", "7"),
        ),
        see_also=("end-of-line", "goto-line"),
    ),
    Doc(
        name="end-of-line",
        summary="Move point to the end of the current line",
        description="Moves point to just before the newline that ends the current line, or to "
        "the end of the buffer on the last line.",
        category="movement",
        examples=(
            Ex("End of the first line", "goto-char 2; end-of-line; point", "first\nsecond", "6"),
            Ex("End of the last line", "goto-char 8; end-of-line; point", "first\nsecond", "13"),
        ),
        see_also=("beginning-of-line", "kill-line"),
    ),
    Doc(
        name="beginning-of-buffer",
        summary="Move point to the very beginning of the buffer",
        description="Sets point to 1.",
        category="movement",
        examples=(Ex("Go back to the start", "end-of-buffer; beginning-of-buffer; point", "Hello", "1"),),
        see_also=("end-of-buffer", "point-min"),
    ),
    Doc(
        name="end-of-buffer",
        summary="Move point to the very end of the buffer",
        description="Sets point to one past the last character.",
        category="movement",
        examples=(Ex("Go to the end", "end-of-buffer; point", "Hello", "6"),),
        see_also=("beginning-of-buffer", "point-max"),
    ),
    Doc(
        name="goto-char",
        summary="Move point to a character position",
        description="Sets point to POSITION. Positions start at 1; values outside the buffer are "
        "clamped to the nearest valid position.",
        category="movement",
        parameters=(Param("position", "number", "Target position (1-based)"),),
        examples=(
            Ex("Go to position 7", "goto-char 7; point", "Hello world", "7"),
            Ex("Positions past the end are clamped", "goto-char 100; point", "Hello world", "12"),
            Ex("Positions before the start are clamped", "goto-char 0; point", "Hello world", "1"),
        ),
        see_also=("goto-line", "point"),
    ),
    Doc(
        name="goto-line",
        summary="Move point to the beginning of a line",
        description="Moves point to the first character of line LINE (1-based). Line numbers "
        "outside the buffer are clamped to the first or last line.",
        category="movement",
        parameters=(Param("line", "number", "Line number (1-based)"),),
        examples=(
            Ex("Go to the second line", "goto-line 2; point", "one\ntwo\nthree", "5"),
            Ex("Go to the last line", "goto-line 3; point", "one\ntwo\nthree", "9"),
            Ex("Line numbers past the end are clamped", "goto-line 10; point", "one\ntwo\nthree", "9"),
        ),
        see_also=("goto-char", "line-number-at-pos"),
    ),
)

POSITION = (
    Doc(
        name="point",
        summary="Return the position of point",
        description="Returns the current cursor position. Position 1 is before the first character.",
        category="position",
        examples=(
            Ex("Point starts at 1", "point", "Hello", "1"),
            Ex("After moving", "goto-char 4; point", "Hello", "4"),
        ),
        see_also=("mark", "goto-char"),
    ),
    Doc(
        name="point-min",
        summary="Return the smallest valid position",
        description="Always 1.",
        category="position",
        examples=(Ex("Minimum position", "point-min", "Hello", "1"),),
        see_also=("point-max",),
    ),
    Doc(
        name="point-max",
        summary="Return the largest valid position",
        description="One more than the number of characters in the buffer.",
        category="position",
        examples=(
            Ex("Five characters", "point-max", "Hello", "6"),
            Ex("Empty buffer", "point-max", "", "1"),
        ),
        see_also=("point-min", "buffer-size"),
    ),
    Doc(
        name="mark",
        summary="Return the position of the mark",
        description="The mark starts at 1 and is moved by set-mark and the marking commands.",
        category="position",
        examples=(
            Ex("Initial mark", "mark", "Hello", "1"),
            Ex("Mark set earlier stays put", "goto-char 4; set-mark; goto-char 1; mark", "Hello", "4"),
        ),
        see_also=("set-mark", "point"),
    ),
    Doc(
        name="current-column",
        summary="Return the column of point",
        description="Counts characters between the start of the current line and point, "
        "starting at 0.",
        category="position",
        examples=(
            Ex("Column on the second line", "goto-char 10; current-column", "first\nsecond", "3"),
            Ex("Start of a line is column 0", "current-column", "first\nsecond", "0"),
        ),
        see_also=("line-number-at-pos", "beginning-of-line"),
    ),
    Doc(
        name="line-number-at-pos",
        summary="Return the line number of point",
        description="Line numbers start at 1.",
        category="position",
        examples=(
            Ex("Point on the second line", "goto-char 6; line-number-at-pos", "one\ntwo\nthree", "2"),
            Ex("End of the buffer", "end-of-buffer; line-number-at-pos", "one\ntwo\nthree", "3"),
        ),
        see_also=("goto-line", "current-column"),
    ),
)

REGION = (
    Doc(
        name="region-beginning",
        summary="Return the start of the region",
        description="The smaller of point and mark.",
        category="region",
        examples=(Ex("Mark after point", "goto-char 8; set-mark; goto-char 3; region-beginning", "Hello world", "3"),),
        see_also=("region-end", "set-mark"),
    ),
    Doc(
        name="region-end",
        summary="Return the end of the region",
        description="The larger of point and mark.",
        category="region",
        examples=(Ex("Mark after point", "goto-char 8; set-mark; goto-char 3; region-end", "Hello world", "8"),),
        see_also=("region-beginning",),
    ),
    Doc(
        name="exchange-point-and-mark",
        summary="Swap point and mark",
        description="Point moves to where the mark was and the mark to where point was.",
        category="region",
        examples=(
            Ex("Point jumps back to the mark", "goto-char 3; set-mark; goto-char 9; exchange-point-and-mark; point",
               "Hello world", "3"),
            Ex("The mark takes the old point", "goto-char 3; set-mark; goto-char 9; exchange-point-and-mark; mark",
               "Hello world", "9"),
        ),
        see_also=("set-mark", "mark"),
    ),
)

MARK = (
    Doc(
        name="set-mark",
        summary="Set the mark at point",
        description="Places the mark at the current point, starting a region.",
        category="mark",
        examples=(
            Ex("Select from the mark to the end", "goto-char 5; set-mark; end-of-buffer; buffer-substring (mark) (point)",
               "Hello world", '"o world"'),
        ),
        see_also=("set-mark-command", "mark", "delete-region"),
    ),
    Doc(
        name="set-mark-command",
        summary="Set the mark at a position or at point",
        description="With POSITION, places the mark there (clamped to the buffer); without it, "
        "places the mark at point.",
        category="mark",
        parameters=(Param("position", "number", "Where to put the mark (default: point)", optional=True),),
        examples=(
            Ex("Explicit position", "set-mark-command 4; mark", "Hello", "4"),
            Ex("Default is point", "goto-char 3; set-mark-command; mark", "Hello", "3"),
            Ex("Positions are clamped", "set-mark-command 50; mark", "Hello", "6"),
        ),
        see_also=("set-mark",),
    ),
    Doc(
        name="mark-word",
        summary="Mark the word at or after point",
        description="When point is on a word, the mark moves to the word's start and point to "
        "its end. Otherwise the next word after point is selected. With no word ahead nothing changes.",
        category="mark",
        examples=(
            Ex("From inside a word", "goto-char 9; mark-word; buffer-substring (region-beginning) (region-end)",
               "Hello world, this is a test buffer.", '"world"'),
            Ex("From the space before a word", "goto-char 6; mark-word; buffer-substring (region-beginning) (region-end)",
               "Hello world, this is a test buffer.", '"world"'),
        ),
        see_also=("mark-line", "forward-word"),
    ),
    Doc(
        name="mark-line",
        summary="Mark one or more lines",
        description="Puts the mark at the start of the current line and point after COUNT lines, "
        "counted from point and including their newlines.",
        category="mark",
        parameters=(_count("lines to mark"),),
        examples=(
            Ex("Mark the second line", "goto-char 6; mark-line; buffer-substring (region-beginning) (region-end)",
               "one\ntwo\nthree", '"two\\n"'),
        ),
        see_also=("mark-word", "delete-line"),
    ),
    Doc(
        name="mark-whole-buffer",
        summary="Mark the entire buffer",
        description="The mark goes to the beginning and point to the end of the buffer.",
        category="mark",
        examples=(
            Ex("Region end is the buffer end", "mark-whole-buffer; region-end", "Hello", "6"),
            Ex("Region covers everything", "mark-whole-buffer; buffer-substring (region-beginning) (region-end)",
               "Hello", '"Hello"'),
        ),
        see_also=("replace-region", "delete-region"),
    ),
)

EDITING = (
    Doc(
        name="insert",
        summary="Insert text at point",
        description="Inserts STRING before point; point ends up after the inserted text.",
        category="editing",
        parameters=(Param("string", "string", "Text to insert"),),
        examples=(
            Ex("Insert at the beginning", 'insert "Hello "; buffer-substring 1 -1', "world", '"Hello world"'),
            Ex("Point moves past the text", 'end-of-buffer; insert "!"; point', "Hi", "4"),
        ),
        see_also=("delete-char", "replace-region"),
    ),
    Doc(
        name="delete-char",
        summary="Delete characters after point",
        description="Deletes COUNT characters starting at point. Point does not move. A count of "
        "zero or less does nothing.",
        category="editing",
        parameters=(_count("characters to delete"),),
        examples=(
            Ex("Delete a word's worth of characters", "goto-char 7; delete-char 5; buffer-substring 1 -1",
               "Hello world", '"Hello "'),
            Ex("Delete one character", "delete-char; buffer-substring 1 -1", "Hello world", '"ello world"'),
        ),
        see_also=("delete-backward-char", "kill-word"),
    ),
    Doc(
        name="delete-backward-char",
        summary="Delete characters before point",
        description="Deletes COUNT characters before point and moves point back over them.",
        category="editing",
        parameters=(_count("characters to delete"),),
        examples=(
            Ex("Delete from the end", "end-of-buffer; delete-backward-char 6; buffer-substring 1 -1",
               "Hello world", '"Hello"'),
            Ex("Point moves back", "goto-char 6; delete-backward-char; point", "Hello world", "5"),
        ),
        see_also=("delete-char", "backward-kill-word"),
    ),
    Doc(
        name="delete-region",
        summary="Delete the text between mark and point",
        description="Works whichever of point and mark comes first. Point ends at the start of "
        "the deleted text.",
        category="editing",
        examples=(
            Ex("Mark before point", "goto-char 6; set-mark; end-of-buffer; delete-region; buffer-substring 1 -1",
               "Hello world", '"Hello"'),
            Ex("Point before mark", "goto-char 7; set-mark; goto-char 1; delete-region; buffer-substring 1 -1",
               "Hello world", '"world"'),
        ),
        see_also=("replace-region", "set-mark"),
    ),
    Doc(
        name="delete-line",
        summary="Delete whole lines",
        description="Deletes COUNT lines starting with the one containing point, newlines "
        "included. Point ends at the start of the deleted text.",
        category="editing",
        parameters=(_count("lines to delete"),),
        examples=(
            Ex("Delete the second line", "goto-line 2; delete-line; buffer-substring 1 -1", "one\ntwo\nthree",
               '"one\\nthree"'),
            Ex("Delete two lines", "goto-char 2; delete-line 2; buffer-substring 1 -1", "one\ntwo\nthree", '"three"'),
        ),
        see_also=("kill-line", "mark-line"),
    ),
    Doc(
        name="kill-line",
        summary="Delete from point to the end of the line",
        description="Deletes the rest of the current line. When point is right before a newline, "
        "the newline is deleted instead. With COUNT greater than 1, deletes COUNT lines from "
        "point, newlines included.",
        category="editing",
        parameters=(_count("lines to kill"),),
        examples=(
            Ex("Kill the rest of the line", "goto-char 6; kill-line; buffer-substring 1 -1", "Hello world\nnext",
               '"Hello\\nnext"'),
            Ex("At the end of a line the newline goes", "goto-char 12; kill-line; buffer-substring 1 -1",
               "Hello world\nnext", '"Hello worldnext"'),
            Ex("Kill two lines", "kill-line 2; buffer-substring 1 -1", "a\nb\nc", '"c"'),
        ),
        see_also=("delete-line", "end-of-line"),
    ),
    Doc(
        name="kill-word",
        summary="Delete words after point",
        description="Deletes the text forward-word would move over.",
        category="editing",
        parameters=(_count("words to delete"),),
        examples=(
            Ex("Kill the first word", "kill-word; buffer-substring 1 -1", "Hello world test", '" world test"'),
            Ex("Kill two words", "goto-char 6; kill-word 2; buffer-substring 1 -1", "Hello world test", '"Hello"'),
        ),
        see_also=("backward-kill-word", "forward-word"),
    ),
    Doc(
        name="backward-kill-word",
        summary="Delete words before point",
        description="Deletes the text backward-word would move over; point ends where the "
        "deleted text began.",
        category="editing",
        parameters=(_count("words to delete"),),
        examples=(
            Ex("Kill the last word", "end-of-buffer; backward-kill-word; buffer-substring 1 -1", "Hello world test",
               '"Hello world "'),
            Ex("Kill two words", "goto-char 12; backward-kill-word 2; buffer-substring 1 -1", "Hello world test",
               '" test"'),
        ),
        see_also=("kill-word", "backward-word"),
    ),
    Doc(
        name="replace-region",
        summary="Replace the region with new text",
        description="Replaces the text between mark and point with STRING and leaves point after "
        "it. An empty region is left unchanged.",
        category="editing",
        parameters=(Param("string", "string", "Replacement text"),),
        examples=(
            Ex("Replace everything", 'mark-whole-buffer; replace-region "X"; buffer-substring 1 -1', "Hello world",
               '"X"'),
            Ex("Replace a word", 'goto-char 7; set-mark; end-of-buffer; replace-region "there"; buffer-substring 1 -1',
               "Hello world", '"Hello there"'),
        ),
        see_also=("delete-region", "mark-whole-buffer"),
    ),
)

SEARCH = (
    Doc(
        name="search-forward",
        summary="Search forward for literal text",
        description="Finds the next occurrence of STRING at or after point and moves point to the "
        "end of it. The match is remembered for replace-match. Fails when there is no match.",
        category="search",
        parameters=(Param("string", "string", "Text to find"),),
        examples=(
            Ex("Point lands after the match", 'search-forward "world"; point', "Hello world", "12"),
            Ex("Repeated searches continue from point", 'search-forward "o"; search-forward "o"; point',
               "Hello world", "9"),
        ),
        see_also=("search-backward", "re-search-forward", "replace-match"),
    ),
    Doc(
        name="search-backward",
        summary="Search backward for literal text",
        description="Finds the last occurrence of STRING that ends before point and moves point "
        "to the end of it. The match is remembered for replace-match.",
        category="search",
        parameters=(Param("string", "string", "Text to find"),),
        examples=(
            Ex("Find an earlier word", 'end-of-buffer; search-backward "two"; point', "one two one", "8"),
            Ex("The last occurrence is found first",
               'end-of-buffer; search-backward "one"; replace-match "ONE"; buffer-substring 1 -1',
               "one two one", '"one two ONE"'),
        ),
        see_also=("search-forward", "re-search-backward"),
    ),
    Doc(
        name="re-search-forward",
        summary="Search forward for a regular expression",
        description="Like search-forward with a regular expression. An invalid pattern is an error.",
        category="search",
        parameters=(Param("regexp", "string", "Pattern to find"),),
        examples=(
            Ex("Find a number", 're-search-forward "[0-9]+"; point', "abc 123 def", "8"),
            Ex("Replace the match", 're-search-forward "[0-9]+"; replace-match "N"; buffer-substring 1 -1',
               "abc 123 def", '"abc N def"'),
        ),
        see_also=("re-search-backward", "search-forward", "replace-match"),
    ),
    Doc(
        name="re-search-backward",
        summary="Search backward for a regular expression",
        description="Finds the last match of REGEXP that lies entirely before point.",
        category="search",
        parameters=(Param("regexp", "string", "Pattern to find"),),
        examples=(
            Ex("Replace the last number",
               'end-of-buffer; re-search-backward "[0-9]+"; replace-match "#"; buffer-substring 1 -1',
               "a1 b22 c333", '"a1 b22 c#"'),
            Ex("Only text before point is searched", 'goto-char 7; re-search-backward "[a-z][0-9]+"; point',
               "a1 b22 c333", "7"),
        ),
        see_also=("re-search-forward", "search-backward"),
    ),
    Doc(
        name="replace-match",
        summary="Replace the text of the last search match",
        description="Replaces the text found by the most recent successful search with STRING "
        "and leaves point after the replacement. Fails if no search has succeeded.",
        category="search",
        parameters=(Param("string", "string", "Replacement text"),),
        examples=(
            Ex("Search and replace", 'search-forward "world"; replace-match "earth"; buffer-substring 1 -1',
               "Hello world", '"Hello earth"'),
            Ex("Point follows the replacement", 'search-forward "Hello"; replace-match "Hi"; point', "Hello world",
               "3"),
        ),
        see_also=("search-forward", "re-search-forward"),
    ),
    Doc(
        name="looking-at",
        summary="Test whether the text after point matches a pattern",
        description="Returns t when PATTERN matches starting exactly at point, nil otherwise. "
        "A pattern that is not a valid regular expression is compared literally.",
        category="search",
        parameters=(Param("pattern", "string", "Regular expression or literal text"),),
        examples=(
            Ex("Regular expression at point", 'looking-at "Hel+o"', "Hello world", "t"),
            Ex("Text after a move", 'goto-char 7; looking-at "world"', "Hello world", "t"),
            Ex("No match at point", 'looking-at "world"', "Hello world", "nil"),
            Ex("Invalid patterns match literally", 'looking-at "a("', "a(b", "t"),
        ),
        see_also=("looking-back", "re-search-forward"),
    ),
    Doc(
        name="looking-back",
        summary="Test whether the text before point matches a pattern",
        description="Returns t when a match of PATTERN ends exactly at point, nil otherwise. "
        "A pattern that is not a valid regular expression is compared literally.",
        category="search",
        parameters=(Param("pattern", "string", "Regular expression or literal text"),),
        examples=(
            Ex("Match ending at point", 'end-of-buffer; looking-back "wor?ld"', "Hello world", "t"),
            Ex("No match before point", 'goto-char 6; looking-back "world"', "Hello world", "nil"),
            Ex("Invalid patterns match literally", 'end-of-buffer; looking-back "[y"', "x[y", "t"),
        ),
        see_also=("looking-at", "re-search-backward"),
    ),
)

STRING = (
    Doc(
        name="concat",
        summary="Concatenate strings",
        description="Joins all arguments, which must be strings. With no arguments returns the "
        "empty string.",
        category="string",
        parameters=(Param("strings", "string", "Strings to join", optional=True),),
        examples=(
            Ex("Join three strings", 'concat "Hello" ", " "world"', "", '"Hello, world"'),
            Ex("No arguments", "concat", "", '""'),
        ),
        see_also=("substring",),
    ),
    Doc(
        name="substring",
        summary="Extract part of a string",
        description="Returns the characters from START up to, but not including, END. Positions "
        "are 1-based; END defaults to the end of the string.",
        category="string",
        parameters=(
            Param("string", "string", "Source string"),
            Param("start", "number", "First position (1-based)"),
            Param("end", "number", "Position after the last character", optional=True),
        ),
        examples=(
            Ex("To the end", 'substring "Hello world" 7', "", '"world"'),
            Ex("Between two positions", 'substring "Hello world" 1 6', "", '"Hello"'),
        ),
        see_also=("buffer-substring", "length"),
    ),
    Doc(
        name="length",
        summary="Return the length of a string",
        description="Counts characters.",
        category="string",
        parameters=(Param("string", "string", "String to measure"),),
        examples=(
            Ex("Five characters", 'length "Hello"', "", "5"),
            Ex("Empty string", 'length ""', "", "0"),
        ),
        see_also=("buffer-size",),
    ),
    Doc(
        name="upcase",
        summary="Convert a string to upper case",
        description="",
        category="string",
        parameters=(Param("string", "string", "String to convert"),),
        examples=(Ex("Upper case", 'upcase "Hello"', "", '"HELLO"'),),
        see_also=("downcase", "capitalize"),
    ),
    Doc(
        name="downcase",
        summary="Convert a string to lower case",
        description="",
        category="string",
        parameters=(Param("string", "string", "String to convert"),),
        examples=(Ex("Lower case", 'downcase "Hello World"', "", '"hello world"'),),
        see_also=("upcase", "capitalize"),
    ),
    Doc(
        name="capitalize",
        summary="Capitalize the first character of a string",
        description="The first character is upper-cased and the rest lower-cased.",
        category="string",
        parameters=(Param("string", "string", "String to convert"),),
        examples=(Ex("Mixed case input", 'capitalize "hELLO wORLD"', "", '"Hello world"'),),
        see_also=("upcase", "downcase"),
    ),
    Doc(
        name="string-match",
        summary="Find a pattern in a string",
        description="Returns the 0-based index of the first match of PATTERN in STRING, or nil. "
        "A pattern that is not a valid regular expression is searched for literally.",
        category="string",
        parameters=(
            Param("pattern", "string", "Regular expression or literal text"),
            Param("string", "string", "String to search"),
        ),
        examples=(
            Ex("Index of the first digit run", 'string-match "[0-9]+" "ab12cd"', "", "2"),
            Ex("No match", 'string-match "zz" "ab12cd"', "", "nil"),
            Ex("Invalid patterns match literally", 'string-match "(" "a(b"', "", "1"),
        ),
        see_also=("replace-regexp-in-string", "looking-at"),
    ),
    Doc(
        name="replace-regexp-in-string",
        summary="Replace every match of a regular expression in a string",
        description="Returns STRING with each match of PATTERN replaced by REPLACEMENT. In the "
        "replacement, \\1 or \\g<name> insert a group. An invalid pattern or replacement is an error.",
        category="string",
        parameters=(
            Param("pattern", "string", "Regular expression"),
            Param("replacement", "string", "Replacement template"),
            Param("string", "string", "Input string"),
        ),
        examples=(
            Ex("Replace digit runs", 'replace-regexp-in-string "[0-9]+" "N" "a1b22c"', "", '"aNbNc"'),
            Ex("Reorder groups", 'replace-regexp-in-string "(\\\\w+)@(\\\\w+)" "\\\\2 at \\\\1" "me@host"', "",
               '"host at me"'),
        ),
        see_also=("string-match", "re-search-forward"),
    ),
)

BUFFER = (
    Doc(
        name="buffer-size",
        summary="Return the number of characters in the buffer",
        description="",
        category="buffer",
        examples=(
            Ex("Eleven characters", "buffer-size", "Hello world", "11"),
            Ex("Empty buffer", "buffer-size", "", "0"),
        ),
        see_also=("point-max",),
    ),
    Doc(
        name="buffer-substring",
        summary="Return the buffer text between two positions",
        description="Returns the text from START up to, but not including, END. END = -1 means "
        "the end of the buffer. Positions are clamped; an empty or inverted range gives \"\".",
        category="buffer",
        parameters=(
            Param("start", "number", "First position (1-based)"),
            Param("end", "number", "Position after the last character, or -1 for the end"),
        ),
        examples=(
            Ex("Whole buffer", "buffer-substring 1 -1", "abcdef", '"abcdef"'),
            Ex("A slice", "buffer-substring 2 4", "abcdef", '"bc"'),
            Ex("Inverted range", "buffer-substring 4 2", "abcdef", '""'),
        ),
        see_also=("substring", "region-beginning"),
    ),
)

ENTRIES = MOVEMENT + POSITION + REGION + MARK + EDITING + SEARCH + STRING + BUFFER
