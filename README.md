# notegraph

Tools for working with the links between notes in a Markdown vault:

- **WikiLink extraction** (`notegraph.wikilink`): find `[[Target]]`,
  `[[Target#Section|Alias]]` and `![[embed]]` links in Markdown text.
- **Link resolution** (`notegraph.resolver`): turn a link target into the
  identifier of the note it points at. It tries these in order:
  1. an exact path
  2. a path relative to the linking note
  3. the file's base name
  4. a loose match that ignores case, a leading `~` or `+`, and `-`/`_` separators
- **Node classification** (`notegraph.classifier`): give each note a type by
  running prioritised rules over it.

The package uses only the standard library.

## Installation

```
pip install notegraph
```

To run the test suite:

```
pip install "notegraph[test]"
pytest
```

## Extracting links

```python
from notegraph.wikilink import extract_wiki_links, filter_by_type, get_unique_targets

text = "See [[concepts/Network#Intro|Networks]] and ![[diagram.png]]."
links = extract_wiki_links(text)

links[0].target        # "concepts/Network"
links[0].section       # "Intro"
links[0].display_text  # "Networks"
links[0].position      # 4
links[1].link_type     # "embed"

filter_by_type(links, "wikilink")   # only the non-embed links
get_unique_targets(links)           # distinct targets, in order of first appearance
```

`WikiLink` is a frozen dataclass with these fields: `raw`, `target`,
`display_text`, `section`, `link_type` and `position`. The `link_type` field
holds either `"wikilink"` or `"embed"`, which are also available as the
constants `WIKILINK` and `EMBED`.

If a link has no alias, `display_text` is the target, with `#section` added
when there is a section. A section-only link such as `[[#Heading]]` gets an
empty target.

Two helpers are exported alongside:

- `parse_wiki_link(raw, inner_content, is_embed, position)` parses the text
  between the brackets.
- `normalize_target(target)` trims a target and lower-cases it.

## Resolving links

`add_file` takes any object that has a `path` attribute and an `id` attribute.
The `path` is relative to the vault root.

```python
from notegraph.resolver import LinkResolver

resolver = LinkResolver()
for note in notes:
    resolver.add_file(note)

file_id = resolver.resolve_link("network", "concepts/other.md")   # None if unresolved
resolved, unresolved = resolver.resolve_links(links, "concepts/other.md")
# resolved: {target: id}, unresolved: list of WikiLink
resolver.get_path(file_id)   # registered path, or None
resolver.stats()   # {"total_files": ..., "unique_basenames": ..., "duplicate_names": ...}
```

If several notes share a base name, the resolver picks the one in the same
directory as the linking note. If none is there, it picks the first one that
was registered.

`normalize_for_matching(s)` is the normalisation that the loose match uses.

## Classifying notes

`classify_node` takes an object with two attributes:

- `path`, relative to the vault root
- `frontmatter`, which is either `None` or an object with a `raw` mapping

```python
from notegraph.classifier import (
    PRIORITY_PATH,
    PRIORITY_TAG,
    ClassificationRule,
    NodeClassifier,
    has_tag,
    is_in_directory,
)

rules = [
    ClassificationRule("index-tag", PRIORITY_TAG, lambda f: has_tag(f, "index"), "index"),
    ClassificationRule(
        "concepts-dir", PRIORITY_PATH, lambda f: is_in_directory(f.path, "concepts"), "concept"
    ),
]
classifier = NodeClassifier(rules, "note")
classifier.classify_node(note)   # "index", "concept" or "note"
classifier.rules                 # the rules in evaluation order
```

### Helpers

- `has_tag(file, tag)` compares tags without regard to case. The `tags` entry
  in the frontmatter may be a single string or a list; entries in the list that
  are not strings are ignored.
- `is_in_directory(path, name)` checks every directory component of the path,
  again without regard to case.

### Rule checking

The constructor checks the rules with `validate_rules` and then sorts them by
priority, with lower numbers first. It raises `RuleValidationError`, a
`ValueError`, in these cases:

- a rule has an empty name
- two rules share a name
- a matcher is missing or not callable
- a node type is empty
- a priority is negative

### Default type

The first matching rule decides the type. If no rule matches, the note gets
the default type. It also gets the default type in these cases:

- the note is `None`
- `is_valid_path` rejects its path, because the path is one of these:
  - empty
  - absolute
  - written with backslashes
  - holding `..` after cleaning
  - holding a NUL byte
  - longer than 500 bytes

## What it does not do

notegraph works only on objects you give it. It does not:

- walk a vault directory
- read files
- parse YAML frontmatter
- provide storage, a server or a command-line tool

You build the note objects that `LinkResolver` and `NodeClassifier` use
yourself.