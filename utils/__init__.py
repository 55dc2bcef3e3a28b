"""
Helpers shared by the graph store and its consumers.

Modules:
    union_find  - Union-Find (disjoint set) over dense integer indices
    graph       - Dense re-indexing, undirected edge lists, connected components
    display     - Print-based diagnostic dumps
    io          - Terminal user interface
"""
