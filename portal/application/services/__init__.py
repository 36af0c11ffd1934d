"""Application services: the query engine building blocks.

Validator, predicate filters, relevance scorer, sorter, paginator and
aggregators. All functions are pure over the entity store snapshot.
"""
