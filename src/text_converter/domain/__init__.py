"""Domain layer — errors and ports with no infrastructure dependencies."""
