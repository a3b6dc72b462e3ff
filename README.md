# searchtrees

Ordered key-value maps built on binary search trees, plus an AVL variant
that rebalances itself on insertion. The package also holds two small
object-oriented examples: a bank account that guards its balance, and a
person/student/teacher hierarchy.

## Install

```
pip install .
```

## Binary search tree

`searchtrees.bst.BinarySearchTree` maps comparable keys to values.

```python
from searchtrees.bst import BinarySearchTree, EmptyTreeError

tree = BinarySearchTree()
tree.insert(10, "A")
tree.insert(20, "B")
tree.insert(5, "C")

len(tree)              # 3, the same as tree.size()
20 in tree             # True
tree.search(5)         # "C"
tree.search(99)        # None: the key is absent
tree.minimum()         # 5
tree.maximum()         # 20
list(tree.in_order())  # [5, 10, 20]

tree.remove(10)        # absent keys are ignored
tree.remove_min()      # does nothing on an empty tree
tree.remove_max()      # does nothing on an empty tree
tree.is_empty()        # True

try:
    tree.minimum()
except EmptyTreeError:  # a LookupError; maximum() raises it too
    ...
```

Inserting an existing key replaces its value and leaves the size unchanged.
Because `search` returns `None` for a missing key, use `key in tree` to tell
a missing key from one whose stored value is `None`.

The traversals are generators of keys: `pre_order()`, `in_order()`,
`post_order()` and `level_order()` (breadth-first from the root). Iterating
over the tree itself yields its keys in ascending order.

## AVL tree

`searchtrees.avl.AVLTree` is a `BinarySearchTree` whose `insert` rotates
nodes to keep the tree balanced. It adds `height()`, the number of levels
(0 for an empty tree).

```python
from searchtrees.avl import AVLTree

tree = AVLTree()
for key, value in [(10, "A"), (20, "B"), (30, "C")]:
    tree.insert(key, value)

tree.height()           # 2
list(tree.pre_order())  # [20, 10, 30]
```

Only insertion rebalances. `remove`, `remove_min` and `remove_max` are the
plain binary-search-tree operations and can leave an `AVLTree` unbalanced.

## Bank account

`searchtrees.accounts.BankAccount` keeps a name and a balance that never
goes below zero.

```python
from searchtrees.accounts import BankAccount, InsufficientBalanceError

account = BankAccount("Alice", 1000)  # a negative initial amount starts at 0
account.deposit(500)                  # amounts that are not positive are ignored
account.balance                       # 1500
account.name                          # "Alice"

try:
    account.withdraw(2000)
except InsufficientBalanceError:      # a ValueError; balance unchanged
    ...
```

`withdraw` raises `InsufficientBalanceError` when the amount is not positive
or is larger than the balance.

## People

`searchtrees.people` has `Person`, with `name`, `age` and `kind`, and two
subclasses: `Student` (kind `"Student"`, with `student_id` and `study()`) and
`Teacher` (kind `"Teacher"`, with `subject` and `teach()`). The methods
return text rather than printing it.

```python
from searchtrees.people import Student, Teacher, all_say_hi

alice = Student("Alice", 16, 1001)
bob = Teacher("Bob", 35, "Math")

alice.study()   # "Alice is studying."
bob.teach()     # "Bob is teaching Math."
all_say_hi([alice, bob])
# ["Hi, I am Alice, and I am 16 years old.",
#  "Hi, I am Bob, and I am 35 years old."]
```

## Commands

Each module has a small fixed demonstration that prints to standard output:

```
searchtrees-bst        # inserts 10 and 20, prints the keys in order
searchtrees-avl        # inserts 10, 20, 30 (forcing a rotation), prints the keys in order
searchtrees-accounts   # refuses an overdraft, then prints the balance
searchtrees-people     # introduces a student and a teacher
```

## What it does not do

The trees live in memory only; there is no saving or loading. The commands
take no options and do not read input: they run their fixed examples. The
tree operations are recursive, so a very deep plain `BinarySearchTree` (for
example, many keys inserted in sorted order) can exceed Python's recursion
limit.

## Tests

```
pip install .[test]
pytest
```