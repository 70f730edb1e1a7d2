from .arrays import display_steps, queue_steps, stack_steps
from .graph_mutation import graph_delete_steps, graph_insert_steps
from .graph_traversal import bfs_steps, dfs_steps, dijkstra_steps, unweighted_shortest_path_steps
from .recursion import factorial_steps
from .searching import binary_search_steps, linear_search_steps
from .sorting import (
    bubble_sort_steps,
    heap_sort_steps,
    insertion_sort_steps,
    merge_sort_steps,
    quick_sort_steps,
    selection_sort_steps,
)
from .tree_mutation import tree_delete_steps, tree_insert_steps
from .tree_traversal import inorder_steps, postorder_steps, preorder_steps, tree_traversal_steps
