# lengthtree

`lengthtree` reads whitespace-separated words, puts them in a binary
search tree keyed by word length, and writes three traversals of that
tree to files.

## Installation

    pip install .

## Usage

    lengthtree words.txt

For an input file `words.txt` this writes three files to the current
directory:

- `words.levelorder`: breadth-first, level by level
- `words.preorder`: node, then left subtree, then right subtree
- `words.postorder`: left subtree, then right subtree, then node

The output name is the last component of the path with its final
extension removed, so `data/words.txt` gives `words.*` files.

Run with no argument and the words are read from standard input instead;
the files are then named `output.levelorder`, `output.preorder` and
`output.postorder`:

    lengthtree < words.txt

More than one argument is a usage error. On success the command prints
`Tree Built & Traversals Done!` and exits with status 0.

## Output format

Every line describes one node. It begins with the node's depth,
right-aligned in a field four characters wide per level, then the word
length the node holds, then the words of that length, with the most
recently read word first. For the input `hello world is a` the pre-order
file reads:

    0 5 world hello
       1 2 is
           2 1 a

## Errors

Words may contain only ASCII letters, digits and the characters
`! " # $ % & ' ( ) * +`. Any other character stops the program with an
error that names the character. Input holding no words, a file that
cannot be opened and output files that cannot be written are errors as
well. Errors are printed to standard error, prefixed with `FATAL:`, and
the command exits with status 1.

## Library use

    from lengthtree.tree import build_tree
    from lengthtree.traversals import pre_order, write_traversals

    with open("words.txt") as stream:
        root = build_tree(stream)

    for line in pre_order(root):
        print(line)

    write_traversals(root, "words", ".")

- `lengthtree.tree.build_tree(stream)` takes any iterable of text lines
  and returns the root `Node`, or `None` when there are no words. It
  raises `InvalidCharacterError` (a `ValueError`, with `char` and `word`
  attributes) when a word has a character that is not allowed.
- `lengthtree.tree.validate_word(word)` checks a single word and returns
  its length.
- `Node` has `value` (the word length), `words`, `left` and `right`;
  `Node.add(word)` places a word in the subtree by its length.
- `lengthtree.traversals` provides `level_order`, `pre_order` and
  `post_order`, generators of output lines, `format_node(node, level)`
  for a single line, and `write_traversals(root, base_name, directory)`,
  which writes the three files and returns their paths. For an empty
  tree it writes only the pre-order and post-order files, both empty.
- `lengthtree.cli.main(argv)` runs the command and returns its exit
  status; `lengthtree.cli.base_name(path)` computes the output name.

## Development

    pip install -e ".[test]"
    pytest