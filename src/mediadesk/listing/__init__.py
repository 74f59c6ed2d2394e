"""List-query contract shared by every collection endpoint.

Stages, in order:
- filters: search text AND field filters -> store predicate
- paging: skip/take -> bounded slice plus total count
- sorting: reorder the fetched slice only (page-scoped)
"""
