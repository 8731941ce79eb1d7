# dslabs

Small, self-contained data-structure and image exercises.

## Modules

- `dslabs.image`: `PNG`, an in-memory grid of `RGBAPixel`s (8-bit r, g, b
  and alpha in [0, 1]). It has `get_pixel`, `read_from_file`,
  `write_to_file`, `resize`, `copy` and `pixels()`. Files are read and written
  with Pillow.
- `dslabs.colorspace`: `RgbaColor`, `HslaColor`, `rgb_to_hsl` and `hsl_to_rgb`.
- `dslabs.filters`: `grayscale`, `create_spotlight`, `ubcify`, `watermark`
  and `colordist`. Each filter returns a new image and leaves its input as it was.
- `dslabs.recursion`: `sum_digits` and `triangle`.
- `dslabs.quackfun`: `stack_sum`, `scramble`, `verify_same`,
  `stack_to_string` and `queue_to_string`. A stack is a list whose last item
  is the top. A queue is a `collections.deque` whose left end is the front.
- `dslabs.linked_list`: `Node`, `LinkedList` (`insert`, `to_list`,
  `delete_last_element`, `remove`, `insert_after`) and `interleave`.
- `dslabs.deque`: `Deque`, a doubly linked deque with `push_left`,
  `push_right`, `pop_left`, `pop_right`, `is_empty` and `remove_duplicates`.
  Popping from an empty deque raises `IndexError`.
- `dslabs.lcg`: a linear congruential generator. It has a shared state
  (`urand`, `urandn`, `usrand`) and a per-instance `Random`.
- `dslabs.treeprint`: `render_tree` and `print_tree` draw a binary tree in ASCII.
- `dslabs.binarytree`: `TreeNode` and `BinaryTree`. The tree has `insert`
  (random or ordered), `height`, `mirror`, `paths`, `sum_distances`,
  `is_ordered`, `left_to_right`, `copy`, `render` and the `print*` variants.
  Random insertion draws from the shared generator in `dslabs.lcg`, so
  calling `usrand` first makes a run repeatable.
- `dslabs.coloredout`: ANSI colour helpers (`output_red`, `output_green`,
  `output_notfound`, `output_bold`, `output_bold_digits`, `Enable`) and
  `colorize_against`, which colours actual output by comparing it with
  expected output.
- `dslabs.treefun`: `output_header` and `print_tree_info`, and the
  `dslabs-treefun` command.

## Installation

```
pip install .
```

## Commands

Apply every filter to an image and write `out-grayscale.png`,
`out-spotlight.png`, `out-ubcify.png` and `out-watermark.png`:

```
dslabs-filters
dslabs-filters --image photo.png --overlay mark.png --output-dir results
```

The defaults are `rosegarden.png`, `overlay.png` and the current directory.

Build the sample trees with fixed seeds and print each one's height, order,
sum of distances, drawing, in-order elements and paths:

```
dslabs-treefun
dslabs-treefun c
dslabs-treefun c --expected soln_treefun.out
```

A mode starting with `c` colours the output against the expected output file,
but only when standard output is a terminal. A missing expected file counts
as empty.

Push strings onto a deque from the left, remove runs of duplicates, and print
what remains from the right:

```
dslabs-deque
dslabs-deque ab ab ba
```

## Library use

```python
from dslabs.binarytree import BinaryTree

tree = BinaryTree()
for value in (5, 3, 8, 1):
    tree.insert(value, True)
print(tree.height(), tree.sum_distances(), tree.is_ordered())
print(tree.render())
```

```python
from dslabs.image import PNG
from dslabs.filters import grayscale

image = PNG()
image.read_from_file("photo.png")
grayscale(image).write_to_file("photo-gray.png")
```

## What it does not do

The package ships no sample images and no expected-output file. You must
supply `dslabs-filters` with its input PNGs. Without an expected-output file,
`dslabs-treefun c` marks everything it prints as unexpected.

## Tests

```
pip install .[test]
pytest
```