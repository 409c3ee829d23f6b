# xmlpull

Building blocks for reading XML as a stream of events: character
classification and text positions, qualified names, attributes,
namespace scopes, text escaping, parser configuration, error values,
reader event classes and a statistics collector that summarises a
stream of events.

No dependencies outside the standard library; Python 3.10 or later.

## Modules

| Module | Contents |
| --- | --- |
| `xmlpull.common` | `TextPosition`, `XmlVersion`, `is_whitespace_char`, `is_whitespace_str`, `is_xml10_char`, `is_xml11_char`, `is_xml11_char_not_restricted`, `is_name_start_char`, `is_name_char` |
| `xmlpull.escape` | `escape_str_attribute`, `escape_str_pcdata` |
| `xmlpull.name` | `Name` |
| `xmlpull.attribute` | `Attribute` |
| `xmlpull.namespace` | `Namespace`, `NamespaceStack` and the `NS_*` constants |
| `xmlpull.indexset` | `AttributesSet` |
| `xmlpull.config` | `ParserConfig` |
| `xmlpull.errors` | `ParseError`, `ErrorKind` |
| `xmlpull.events` | `XmlEvent` and its subclasses |
| `xmlpull.stats` | `DocumentStats`, `analyze_events` |

## Characters and positions

```python
from xmlpull.common import TextPosition, XmlVersion, is_name_start_char

pos = TextPosition()
pos.advance(3)
pos.new_line()
str(pos)                     # '2:1'  (printed one-based)
pos.advance_to_tab(4)        # column moves to the next multiple of 4

is_name_start_char("_")      # True
is_name_start_char("1")      # False
XmlVersion.VERSION_10 < XmlVersion.VERSION_11   # True
```

## Escaping text

```python
from xmlpull.escape import escape_str_attribute, escape_str_pcdata

escape_str_attribute("<>'\"&\n\r")  # '&lt;&gt;&apos;&quot;&amp;&#xA;&#xD;'
escape_str_pcdata("<>&")            # '&lt;&gt;&amp;'
escape_str_pcdata("no_escapes")     # 'no_escapes'
```

Attribute escaping also turns line breaks into character references, so
an attribute value always stays on one line.

## Names and attributes

```python
from xmlpull.name import Name
from xmlpull.attribute import Attribute

name = Name.from_str("prefix:name")
name.local_name   # 'name'
name.prefix       # 'prefix'
name.to_repr()    # 'prefix:name'

qualified = Name.qualified("attribute", "urn:namespace", "n")
str(qualified)    # '{urn:namespace}n:attribute'

attr = Attribute(qualified, "a < b")
str(attr)         # '{urn:namespace}n:attribute="a &lt; b"'
```

`Name.from_str` splits at the first colon without checking anything.
`Name.parse` is the strict form and raises `ValueError` for an empty
name, an empty prefix or local name, or more than one colon.
`Attribute` also accepts a plain string as its name.

`AttributesSet` keeps attributes in insertion order and answers
`name in attributes` by name.

## Namespaces

`Namespace` maps prefixes to URIs and iterates its `(prefix, uri)` pairs
in prefix order. `NamespaceStack` layers namespaces for nested elements
and resolves a prefix from the top of the stack down.

```python
from xmlpull.namespace import NamespaceStack

stack = NamespaceStack.default()   # binds xml, xmlns and the empty prefix
stack.push_empty()
stack.put("a", "urn:A")
stack.get("a")                     # 'urn:A'
stack.get("xml")                   # 'http://www.w3.org/XML/1998/namespace'
list(stack)                        # visible mappings, each prefix once
stack.pop()
stack.squash()                     # one Namespace of what remains
```

`put` never overwrites a binding in the top namespace; `put_checked`
skips a binding that already exists with the same URI anywhere in the
stack. `extend` and `extend_checked` apply them to many pairs. `pop` and
`peek` raise `IndexError` on an empty stack; `try_pop` returns `None`.

## Parser configuration

`ParserConfig` is an immutable set of options; changed copies come from
`replace` and `add_entity`.

```python
from xmlpull.config import ParserConfig

config = ParserConfig().add_entity("nbsp", "\u00a0")
quiet = config.replace(trim_whitespace=True, coalesce_characters=False)
```

By default comments are ignored, adjacent character data is merged,
root-level whitespace is ignored and multiple root elements are allowed.
Limits default to 1,000,000 characters of entity expansion, an expansion
depth of 10, 65,536 attributes, 2^30 characters per attribute value and
per text block, and 2^18 characters per name. Limits must be
non-negative integers, and the expansion depth at most 255.

## Errors

```python
from xmlpull.common import TextPosition
from xmlpull.errors import ParseError, ErrorKind

err = ParseError.syntax(TextPosition(0, 4), "Unexpected token")
str(err)       # '1:5 Unexpected token'
err.kind       # ErrorKind.SYNTAX
ParseError.unexpected_eof(TextPosition()).msg()   # 'Unexpected EOF'
```

`ParseError.io` wraps an exception raised by an underlying stream.

## Events and statistics

Reader events are frozen value classes, all subclasses of `XmlEvent`:
`StartDocument`, `EndDocument`, `ProcessingInstruction`,
`StartElement`, `EndElement`, `CData`, `Comment`, `Characters` and
`Whitespace`. `StartElement` and `EndElement` accept a `Name` or a
string.

```python
from xmlpull.events import StartDocument, StartElement, Characters, EndElement, EndDocument
from xmlpull.stats import analyze_events

stats = analyze_events([
    StartDocument(),
    StartElement("root"),
    Characters("hi"),
    EndElement("root"),
    EndDocument(),
])
stats.elements     # 1
stats.max_depth    # 1
stats.characters   # 2
print(stats.report())
```

Character and comment counts are measured in UTF-8 bytes. Whitespace
events are not counted, and the built-in namespace URIs are left out of
`stats.namespaces`.

## What this package does not do

It contains no lexer or parser: nothing here reads bytes or text and
produces events, and `ParserConfig` is not consumed by anything in the
package. There is no writer that turns events back into XML, and no
command-line program; `analyze_events` works on events you supply.