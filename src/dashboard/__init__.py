from .stats import DashboardStats, GoalProgress, build_stats

__all__ = ["DashboardStats", "GoalProgress", "build_stats"]
