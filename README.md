# pyminishell

The front end of a small POSIX-style shell: it splits a command line into
words and operators, expands variables, and builds a pipeline tree that
describes what to run.

## What it handles

- Pipes: `ls | grep py | wc -l`, grouped to the left
- Redirections `<`, `>`, `>>` and the here-document operator `<<`
- Single and double quotes; nothing is expanded inside single quotes
- Variables: `$NAME`, `${NAME}`, `$?` for a given exit status, and `$1`-style
  digits (the digit is dropped, the text after it kept)
- The word after `<<` is never expanded, and a quoted delimiter is marked
  as quoted on the resulting redirect
- Errors raise `pyminishell.errors.ShellError`: an unclosed quote or a
  redirection with no target word gives `ErrorCode.SYNTAX_ERR`, a second `{`
  in an expanded word gives `ErrorCode.SUBS_ERR`

## Installing

```
pip install .
```

## Usage

```python
from pyminishell.env import fill_env_list
from pyminishell.lexer import tokenize, assign_expanded
from pyminishell.expander import expand_tokens
from pyminishell.parser import parse_pipeline, format_ast

env = fill_env_list(["USER=alice", "HOME=/home/alice"])

tokens = tokenize('echo "hi $USER" > out.txt | wc -c')
expand_tokens(tokens, env, 0)   # expand segments in place; 0 is the value of $?
assign_expanded(tokens)         # join segments into each token's text
tree = parse_pipeline(tokens)

print(format_ast(tree))
```

prints

```
AST_PIPE:    
 AST_COMMAND: [echo] [hi alice] >'out.txt' 
 AST_COMMAND: [wc] [-c] 
```

### Modules

- `pyminishell.lexer` – `tokenize`, `build_segments`, `join_segments`,
  `assign_expanded`
- `pyminishell.expander` – `expand_value(raw, env, status)`,
  `expand_segment_value`, `expand_tokens`, `has_bad_substitution`,
  `is_valid_var`, `check_expand_case`
- `pyminishell.parser` – `AstNode`, `AstType`, `Redirect`, `RedirType`,
  `parse_pipeline`, `parse_command`, `redirect_type`, `format_ast`
- `pyminishell.tokens` – `Token`, `TokenType`, `Segment`, `QuoteType`,
  `is_whitespace`, `is_special_char`, `format_tokens`
- `pyminishell.env` – `Environment` (ordered, with `get`, `set`, `unset`,
  `to_list`) and `fill_env_list`, which reads `KEY=VALUE` strings, a mapping,
  or the process environment
- `pyminishell.errors` – `ErrorCode`, `ErrorContext`, `ShellError` (with
  `status` and `message`) and `check_error`, which prints a message to stderr
  and returns the exit status for it
- `pyminishell.session` – the `Shell` and `Session` state records

## What it does not do

This package stops at the syntax tree. It has no interactive prompt or
command to start, does not run commands or set up pipes and redirections,
does not read here-document bodies, and does not handle signals.

## Running the tests

```
pip install .[test]
pytest
```