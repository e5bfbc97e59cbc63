"""The builtin library as one static, read-only table.

Every builtin has the signature `fn(args, buffer) -> Value`: `args` holds the
already evaluated arguments and `buffer` is the Buffer being edited. Commands
return the empty String; queries return a Number, String or the symbols t/nil.
"""

from types import MappingProxyType

from texted.builtin import content, editing, mark, movement, position, search, strings

BUILTINS = MappingProxyType({
    # movement
    "forward-char": movement.forward_char,
    "backward-char": movement.backward_char,
    "forward-word": movement.forward_word,
    "backward-word": movement.backward_word,
    "beginning-of-line": movement.beginning_of_line,
    "end-of-line": movement.end_of_line,
    "beginning-of-buffer": movement.beginning_of_buffer,
    "end-of-buffer": movement.end_of_buffer,
    "goto-char": movement.goto_char,
    "goto-line": movement.goto_line,
    # position
    "point": position.point,
    "point-min": position.point_min,
    "point-max": position.point_max,
    "mark": position.mark,
    "buffer-size": position.buffer_size,
    "current-column": position.current_column,
    "line-number-at-pos": position.line_number_at_pos,
    "region-beginning": position.region_beginning,
    "region-end": position.region_end,
    # mark
    "set-mark": mark.set_mark,
    "set-mark-command": mark.set_mark_command,
    "exchange-point-and-mark": mark.exchange_point_and_mark,
    "mark-word": mark.mark_word,
    "mark-line": mark.mark_line,
    "mark-whole-buffer": mark.mark_whole_buffer,
    # editing
    "insert": editing.insert,
    "delete-char": editing.delete_char,
    "delete-backward-char": editing.delete_backward_char,
    "delete-region": editing.delete_region,
    "delete-line": editing.delete_line,
    "kill-line": editing.kill_line,
    "kill-word": editing.kill_word,
    "backward-kill-word": editing.backward_kill_word,
    "replace-region": editing.replace_region,
    # search
    "search-forward": search.search_forward,
    "search-backward": search.search_backward,
    "re-search-forward": search.re_search_forward,
    "re-search-backward": search.re_search_backward,
    "replace-match": search.replace_match,
    "looking-at": search.looking_at,
    "looking-back": search.looking_back,
    # string
    "concat": strings.concat,
    "substring": strings.substring,
    "length": strings.length,
    "upcase": strings.upcase,
    "downcase": strings.downcase,
    "capitalize": strings.capitalize,
    "string-match": strings.string_match,
    "replace-regexp-in-string": strings.replace_regexp_in_string,
    # buffer
    "buffer-substring": content.buffer_substring,
})

__all__ = ["BUILTINS"]
