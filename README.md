# algoshelf

A shelf of classic algorithms and data structures in plain Python, with no
third-party dependencies:

- **Search trees**
  - `algoshelf.avl.AVLTree`: a self-balancing AVL tree with `insert`,
    `erase`, membership tests (`key in tree`) and `describe()`. The last
    returns pre-order lines of the form `(key[height] | left right)`, with
    `-1` for a missing child. An optional `log` callable receives a message
    for every rotation and rebalancing case.
  - `algoshelf.bstree.BSTree`: a set-like unbalanced search tree. `insert`
    and `erase` return whether the tree changed. `inorder()` lists the keys
    in ascending order.
  - `algoshelf.bst`: node-level functions `insert`, `erase`, `in_order` and
    `describe` over `Node` objects. Each takes a root, which may be `None`,
    and returns the new root.
- **Graphs**
  - `algoshelf.graph.AdjacencyMatrix`: a directed graph of up to 20 named
    vertices, with `add_arc`, `has_arc`, `index_of` and `has_path`.
  - `algoshelf.pathquery`: `parse_graph` reads a graph from text and
    `answer_queries` answers reachability questions about it.
- **Expressions** (`algoshelf.calculator`)
  - `validate` and `is_legitimate` check an expression. `validate` raises
    `ExpressionError` for the first problem it finds.
  - `infix_to_suffix` converts infix to postfix, and `eval_rpn` evaluates
    postfix integer tokens. Division truncates toward zero.
  - `calculate` evaluates expressions with decimals and parentheses as a float.
- **Polynomials**
  - `algoshelf.polyterms`: `Term`, `parse_terms` for `(coef,exp)` groups, and
    `format_terms`.
  - `algoshelf.derivative`: `derivative` and `differentiate_text`.
- **Selection** (`algoshelf.selection`)
  - `find_two_largest` returns the largest and second-largest values in one
    pass.
- **Puzzles** (`algoshelf.puzzles`)
  - `PrefixSums` answers 1-based inclusive range sums.
  - `min_subarray_len` and `length_of_longest_substring` are sliding-window
    problems.
  - `count_tight_groups`, `multiple_reward`, `nth_even_digit_number` and
    `count_repdigits_upto` are small counting problems.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library use

```python
from algoshelf.bstree import BSTree
from algoshelf.calculator import calculate, is_legitimate
from algoshelf.graph import AdjacencyMatrix
from algoshelf.puzzles import length_of_longest_substring, min_subarray_len

tree = BSTree()
for key in (5, 3, 4, 1, 7):
    tree.insert(key)
print(3 in tree)          # True
print(tree.inorder())     # [1, 3, 4, 5, 7]

print(is_legitimate("(1+2"))                   # False
print(calculate("2.5*3+260.72*3/10"))          # about 85.716

graph = AdjacencyMatrix("ABC")
graph.add_arc("A", "B")
print(graph.has_path("A", "B"), graph.has_path("B", "A"))  # True False

print(min_subarray_len(7, [2, 3, 1, 2, 4, 3])) # 2
print(length_of_longest_substring("abcabcbb")) # 3
```

## Command-line tools

| Command                | What it does |
|------------------------|--------------|
| `algoshelf-avl`        | Reads integers from standard input in three phases: insert, erase and find. Each phase ends with `-1`. Prints each rotation and the tree after every change. |
| `algoshelf-bst`        | Inserts ten random keys below 100 into a search tree, then erases the keys read from standard input. `--seed N` makes the keys repeatable. |
| `algoshelf-calc`       | Validates and evaluates an expression given as arguments, or read from standard input when there are none. It prints an error and exits with status 1 if the expression is invalid. |
| `algoshelf-derivative` | Reads a count `n` and then `n+1` `(coef,exp)` groups from standard input, and prints the derivative. |
| `algoshelf-paths`      | Reads a vertex count, the vertex names, an arc count and `<a,b>` arcs from standard input. Then reads a query count and `[a,b]` queries, and prints `From a to b: YES.` or `NO.` for each. |

For example:

```
$ algoshelf-calc "2.5*3+260.72*3/10"
85.716
```

## What it does not include

The package contains no sorting routines. It also has no weighted graphs,
spanning trees or graph traversal listings. The only graph question it
answers is whether one vertex can be reached from another.