#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块
"""

from .dfs_planner import DfsPlanner, SearchState, TraceStep
from .map_model import PlanRequest, PlanResult

__all__ = ['DfsPlanner', 'SearchState', 'TraceStep', 'PlanRequest', 'PlanResult']
