"""Shared fixtures for the OKR rollup tests."""
import pytest

from okr_rollup.progress import HierarchyLevel, HierarchyNode


def make_node(node_id, level, children=(), formula=None, current=None, target=None, name=''):
    return HierarchyNode(
        id=node_id,
        level=level,
        name=name,
        formula=formula,
        current_value=current,
        target_value=target,
        children=tuple(children),
    )


def kr(node_id, indicators=(), formula=None, current=None, target=None):
    return make_node(node_id, HierarchyLevel.KEY_RESULT, indicators, formula, current, target)


def fo(node_id, key_results=(), formula=None, current=None, target=None):
    return make_node(node_id, HierarchyLevel.FUNCTIONAL_OBJECTIVE, key_results, formula, current, target)


def dept(node_id, fos=(), formula=None):
    return make_node(node_id, HierarchyLevel.DEPARTMENT, fos, formula)


def org(node_id, depts=(), formula=None):
    return make_node(node_id, HierarchyLevel.ORG_OBJECTIVE, depts, formula)


def ind(node_id, current, target):
    return HierarchyNode.indicator(node_id, current, target, name=f"KPI {node_id}")


@pytest.fixture
def sample_org_objectives():
    """
    Two org objectives:

    org-1
      dept-1
        fo-1 (SUM)
          kr-1 (AVG): 80/100, None/50        -> 80
          kr-2 (MIN): 30/100, 90/100         -> 30
        fo-2 (no data anywhere)
      dept-2
        fo-3 (WEIGHTED_AVG)
          kr-3 (target 1): 50/100            -> 50
          kr-4 (target 3): 100/100           -> 100
    org-2
      dept-3 (empty)
    """
    return [
        org('org-1', [
            dept('dept-1', [
                fo('fo-1', [
                    kr('kr-1', [ind('i-1', 80, 100), ind('i-2', None, 50)], formula='AVG'),
                    kr('kr-2', [ind('i-3', 30, 100), ind('i-4', 90, 100)], formula='MIN(KPIs)'),
                ], formula='SUM of KRs'),
                fo('fo-2', [kr('kr-5', [ind('i-5', None, None)])]),
            ], formula='SUM'),
            dept('dept-2', [
                fo('fo-3', [
                    kr('kr-3', [ind('i-6', 50, 100)], target=1),
                    kr('kr-4', [ind('i-7', 100, 100)], target=3),
                ], formula='Weighted avg by target'),
            ]),
        ]),
        org('org-2', [dept('dept-3')]),
    ]
