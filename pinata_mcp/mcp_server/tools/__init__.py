"""Tool handler modules, one per upstream resource family."""
