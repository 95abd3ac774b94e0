# algokata

A collection of classic interview-style algorithms and data structures,
written as small, plain Python functions and classes. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokata.linked_lists` | `ListNode`, `build_list`, `list_values`, `merge_two_lists`, `merge_two_lists_copying`, `append_to_tail`, `add_two_numbers`, `detect_cycle`, `find_intersection`, `find_intersection_hashed`, `kth_to_last`, `reverse_list`, `is_palindrome_list`, `partition_list`, `delete_sorted_duplicates`, `remove_duplicates_with_buffer`, `remove_duplicates_no_buffer`, `sum_lists`, `sum_lists_forward` |
| `algokata.graphs` | `GraphNode`, `has_route` (breadth first), `has_route_dfs` (depth first) |
| `algokata.tries` | `Trie` (`insert`, `search`, `starts_with`) and `MapSum` (`insert`, `sum` over a prefix) |
| `algokata.trees` | `TreeNode`, `build_tree` (from level-order values), `dfs`, `bfs`, `inorder`, `preorder`, `postorder`, `is_same_tree`, `is_symmetric`, `is_balanced`, `check_balanced`, `height`, `first_common_ancestor`, `closest_nodes`, `create_minimal_bst`, `validate_bst`, `list_of_depths` |
| `algokata.stacks` | `MinStack`, `SortedStack`, `SetOfStacks`, `AnimalShelter` with `Animal` and `AnimalType` |
| `algokata.text` | `add_binary`, `str_str`, `is_valid_parentheses`, `is_one_away`, `is_unique`, `is_unique_set`, `length_of_last_word`, `length_of_longest_substring`, `longest_common_prefix`, `is_palindrome_permutation`, `roman_to_int`, `compress`, `is_rotation`, `urlify`, `reverse_string`, `is_palindrome_string` |
| `algokata.arithmetic` | `is_palindrome_number`, `my_sqrt`, `sqrt_linear`, `climb_stairs`, `climb_stairs_memo`, `triple_step`, `count_down`, `sum_array` |
| `algokata.arrays` | `get_winner`, `max_profit`, `max_profit_tracking`, `merge`, `merge_sorted`, `minimum_average_difference`, `plus_one`, `remove_duplicates`, `remove_element`, `search_insert`, `find_magic_index`, `power_set` |
| `algokata.matrices` | `rotate_matrix`, `rotate_matrix_in_place`, `zero_matrix`, `zero_matrix_marked`, `find_path` |

## Examples

```python
from algokata.linked_lists import build_list, list_values, merge_two_lists

merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
print(list_values(merged))  # [1, 1, 2, 3, 4, 4]
```

```python
from algokata.trees import build_tree, inorder, is_balanced

root = build_tree([4, 2, 6, 1, 3, 5, 7])
print(inorder(root))      # [1, 2, 3, 4, 5, 6, 7]
print(is_balanced(root))  # True
```

```python
from algokata.tries import Trie, MapSum

trie = Trie()
trie.insert("apple")
print(trie.search("apple"), trie.starts_with("app"))  # True True

sums = MapSum()
sums.insert("apple", 3)
sums.insert("app", 2)
print(sums.sum("ap"))  # 5
```

```python
from algokata.stacks import AnimalShelter, Animal, AnimalType

shelter = AnimalShelter()
shelter.enqueue(Animal(AnimalType.DOG, "Rex"))
shelter.enqueue(Animal(AnimalType.CAT, "Whiskers"))
print(shelter.dequeue_cat().name)  # Whiskers
```

```python
from algokata.text import add_binary, roman_to_int, compress

print(add_binary("1010", "1011"))  # 10101
print(roman_to_int("MCMXCIV"))     # 1994
print(compress("aabcccccaaa"))     # a2b1c5a3
```

```python
from algokata.matrices import rotate_matrix, find_path

print(rotate_matrix([[1, 2], [3, 4]]))          # [[3, 1], [4, 2]]
print(find_path([[True, True], [True, True]]))  # [[0, 0], [0, 1], [1, 1]]
```

## Behaviour worth knowing

- Nodes (`ListNode`, `TreeNode`, `GraphNode`) compare by identity, so they
  can be kept in sets and compared with `is`.
- `MinStack`, `SortedStack` and `SetOfStacks` return `0` when read while
  empty; the `AnimalShelter` dequeue methods return `None` when no matching
  animal is left.
- `is_balanced` and `check_balanced` are strict: subtrees must have exactly
  equal heights.
- `compress` returns its input unchanged unless some run of one character is
  at least three long.
- `my_sqrt(0)` returns `-1`.
- `find_path` moves right before down and returns `None` when no path exists.

## What it does not do

`algokata` is a library only: it has no command-line program, and nothing
is stored between runs.