from vecscript.parser import parse_script
from vecscript.runtime import DependencyGraph, Runtime, SourceOperation
from vecscript.values import Vec2


def _runtime(source: str) -> Runtime:
    runtime = Runtime()
    runtime.run(parse_script(source).instructions)
    return runtime


def test_operation_registers_edges_for_vector_operands_only() -> None:
    runtime = _runtime("a = Vec2(1, 1)\nb = Vec2(2, 3)\nc = a + b\nd = a * 2")
    graph = runtime.dependency_graph
    a = runtime.variables["a"].value
    b = runtime.variables["b"].value
    c = runtime.variables["c"].value
    d = runtime.variables["d"].value
    assert isinstance(a, Vec2) and isinstance(b, Vec2) and isinstance(c, Vec2) and isinstance(d, Vec2)

    assert graph.dependents(a) == (c, d)
    assert graph.dependents(b) == (c,)
    assert graph.dependents(c) == ()

    operation = graph.source_operation(d)
    assert operation is not None
    assert operation.operator == "*"
    assert operation.operands[0] is a
    assert operation.operands[1] == 2.0
    assert operation.target is d


def test_scalar_results_have_no_source_operation() -> None:
    runtime = _runtime("a = 1 + 2")

    assert len(runtime.dependency_graph) == 0


def test_repeated_operand_links_once() -> None:
    runtime = _runtime("a = Vec2(1, 2)\nb = a + a")
    a = runtime.variables["a"].value
    assert isinstance(a, Vec2)

    assert len(runtime.dependency_graph.dependents(a)) == 1


def test_recompute_updates_target_in_place() -> None:
    runtime = _runtime("a = Vec2(1,1), interactive\nd = a * 2, reference")
    a = runtime.variables["a"].value
    entry = runtime.variables["d"]
    d = entry.value
    assert isinstance(a, Vec2) and isinstance(d, Vec2)

    a.x = 3
    a.y = 3
    operation = runtime.dependency_graph.source_operation(d)
    assert operation is not None
    operation.recompute()

    assert d == Vec2(6, 6)
    assert runtime.variables["d"] is entry
    assert runtime.variables["d"].value is d


def test_scalar_minus_vector_recompute() -> None:
    a = Vec2(1, 2)
    target = Vec2(9, 8)
    operation = SourceOperation(operator="-", operands=(10.0, a), target=target)

    a.reset(4, 5)
    operation.recompute()

    assert target == Vec2(6, 5)


def test_propagate_only_refreshes_reference_vectors() -> None:
    runtime = _runtime("a = Vec2(1, 1), interactive\nd = a * 2, reference\ne = a * 3")
    a = runtime.variables["a"].value
    assert isinstance(a, Vec2)

    a.reset(2, 2)
    refreshed = runtime.propagate(a)

    assert refreshed == [runtime.variables["d"].value]
    assert runtime.variables["d"].value == Vec2(4, 4)
    assert runtime.variables["e"].value == Vec2(3, 3)


def test_propagate_follows_reference_chains_in_evaluation_order() -> None:
    source = """
    a = Vec2(1, 1), interactive
    d = a * 2, reference
    e = d + a, reference
    """
    runtime = _runtime(source)
    a = runtime.variables["a"].value
    assert isinstance(a, Vec2)

    a.reset(2, 0)
    runtime.propagate(a)

    assert runtime.variables["d"].value == Vec2(4, 0)
    assert runtime.variables["e"].value == Vec2(6, 0)


def test_propagate_refreshes_unbound_intermediates() -> None:
    runtime = _runtime("a = Vec2(1, 1)\nb = Vec2(0, 1)\nc = b + a * 2, reference")
    a = runtime.variables["a"].value
    assert isinstance(a, Vec2)
    assert runtime.variables["c"].value == Vec2(2, 3)

    a.reset(3, 0)
    runtime.propagate(a)

    assert runtime.variables["c"].value == Vec2(6, 1)


def test_stale_non_reference_stops_propagation() -> None:
    source = """
    a = Vec2(1, 1)
    d = a * 2
    e = d + 1, reference
    """
    runtime = _runtime(source)
    a = runtime.variables["a"].value
    assert isinstance(a, Vec2)

    a.reset(5, 5)
    runtime.propagate(a)

    assert runtime.variables["d"].value == Vec2(2, 2)
    assert runtime.variables["e"].value == Vec2(3, 3)


def test_in_script_mutation_refreshes_reference_dependents() -> None:
    runtime = _runtime("a = Vec2(1, 1)\nd = a + 1, reference\na.x = 4")

    assert runtime.variables["d"].value == Vec2(5, 2)


def test_graph_iterates_operands_with_dependents() -> None:
    graph = DependencyGraph()
    a = Vec2(1, 1)
    b = Vec2(2, 2)
    graph.link(a, b)

    assert [(operand, dependents) for operand, dependents in graph] == [(a, (b,))]
    assert graph.has_dependents(a) is True
    assert graph.has_dependents(b) is False


def test_method_call_in_expression_refreshes_reference_dependents() -> None:
    runtime = _runtime("a = Vec2(1, 1), interactive\nd = a * 2, reference\ng = a.scale(3)")

    assert runtime.variables["a"].value == Vec2(3, 3)
    assert runtime.variables["d"].value == Vec2(6, 6)


def test_rebound_non_reference_vector_stops_propagation() -> None:
    runtime = _runtime("a = Vec2(1, 1), interactive\nd = a * 2\nd = d + 1, reference")
    a = runtime.variables["a"].value
    assert isinstance(a, Vec2)

    a.reset(5, 5)
    runtime.propagate(a)

    assert runtime.variables["d"].value == Vec2(3, 3)


def test_rebound_reference_vector_keeps_propagating() -> None:
    runtime = _runtime("a = Vec2(1, 1)\nd = a * 2, reference\nd = d + 1, reference")
    a = runtime.variables["a"].value
    assert isinstance(a, Vec2)

    a.reset(5, 5)
    runtime.propagate(a)

    assert runtime.variables["d"].value == Vec2(11, 11)
