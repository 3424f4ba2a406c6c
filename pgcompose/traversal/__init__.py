from pgcompose.traversal.visitor_pattern import ItemVisitor

__all__ = ["ItemVisitor"]
