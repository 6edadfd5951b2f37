from .maze_service import MazeSolvingService, MazeSolveSummary

__all__ = ['MazeSolvingService', 'MazeSolveSummary']
