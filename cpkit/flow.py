"""Network flow: Dinic maximum flow and minimum-cost maximum flow."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Any, Optional


class _Network:
    """Residual graph shared by the flow networks.

    Every edge is stored next to its reverse edge, so ``index ^ 1`` is the
    partner of edge ``index``.
    """

    def __init__(self, n: int, source: Optional[int], sink: Optional[int]) -> None:
        if n < 1:
            raise ValueError("a flow network needs at least one vertex")
        source = n - 2 if source is None else source
        sink = n - 1 if sink is None else sink
        if not (0 <= source < n and 0 <= sink < n):
            raise ValueError("source and sink must be vertices of the network")
        if source == sink:
            raise ValueError("source and sink must differ")
        self._n = n
        self._source = source
        self._sink = sink
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        self._cap: list[Any] = []
        self._flow: list[Any] = []
        self._cost: list[Any] = []

    def __len__(self) -> int:
        return self._n

    @property
    def source(self) -> int:
        return self._source

    @property
    def sink(self) -> int:
        return self._sink

    def _check_vertex(self, u: int) -> None:
        if not 0 <= u < self._n:
            raise IndexError(f"vertex {u} out of range")

    def _add(self, u: int, v: int, capacity: Any, cost: Any) -> None:
        self._check_vertex(u)
        self._check_vertex(v)
        self._adj[u].append((v, len(self._cap)))
        self._cap.append(capacity)
        self._flow.append(0)
        self._cost.append(cost)
        self._adj[v].append((u, len(self._cap)))
        self._cap.append(0)
        self._flow.append(0)
        self._cost.append(-cost)

    def _add_super_source(self, k: int) -> int:
        new_source = self._n
        self._n += 1
        self._adj.append([])
        return new_source

    def _spfa(self) -> list[Any]:
        """Shortest residual distances by cost from the source."""
        n = self._n
        distance: list[Any] = [math.inf] * n
        in_queue = [False] * n
        queue = deque([self._source])
        distance[self._source] = 0
        in_queue[self._source] = True
        while queue:
            u = queue.popleft()
            in_queue[u] = False
            for v, ei in self._adj[u]:
                if self._flow[ei] >= self._cap[ei]:
                    continue
                new_dist = distance[u] + self._cost[ei]
                if new_dist < distance[v]:
                    distance[v] = new_dist
                    if not in_queue[v]:
                        queue.append(v)
                        in_queue[v] = True
        return distance

    def _push(self, ei: int, amount: Any) -> None:
        self._flow[ei] += amount
        self._flow[ei ^ 1] -= amount


class FlowNetwork(_Network):
    """Directed network for maximum flow; source and sink default to the last two vertices."""

    def __init__(self, n: int, source: Optional[int] = None, sink: Optional[int] = None) -> None:
        super().__init__(n, source, sink)

    def push_edge(self, u: int, v: int, capacity: Any) -> None:
        """Add a directed edge ``u -> v`` with the given capacity."""
        self._add(u, v, capacity, 0)

    def set_k_flow(self, k: Any) -> None:
        """Limit the total flow to ``k`` by adding a new source in front of the old one."""
        new_source = self._add_super_source(k)
        self.push_edge(new_source, self._source, k)
        self._source = new_source

    def _levels(self) -> list[Any]:
        distance: list[Any] = [math.inf] * self._n
        distance[self._source] = 0
        queue = deque([self._source])
        while queue:
            u = queue.popleft()
            if u == self._sink:
                break
            for v, ei in self._adj[u]:
                if distance[v] == math.inf and self._flow[ei] < self._cap[ei]:
                    distance[v] = distance[u] + 1
                    queue.append(v)
        return distance

    def dinic_max_flow(self) -> Any:
        """Push as much flow as possible from source to sink and return its amount."""
        cap, flw, adj, sink = self._cap, self._flow, self._adj, self._sink
        max_flow: Any = 0

        while True:
            distance = self._levels()
            if distance[sink] == math.inf:
                return max_flow
            pointer = [0] * self._n

            def dfs(u: int, flow: Any) -> Any:
                if u == sink or flow == 0:
                    return flow
                current = 0
                edges = adj[u]
                while pointer[u] < len(edges):
                    v, ei = edges[pointer[u]]
                    if distance[v] == distance[u] + 1:
                        pushed = dfs(v, min(flow - current, cap[ei] - flw[ei]))
                        if pushed > 0:
                            self._push(ei, pushed)
                            current += pushed
                            if current == flow:
                                return current
                    pointer[u] += 1
                return current

            max_flow += dfs(self._source, math.inf)


class CostFlowNetwork(_Network):
    """Directed network with per-unit edge costs for minimum-cost maximum flow."""

    def __init__(self, n: int, source: Optional[int] = None, sink: Optional[int] = None) -> None:
        super().__init__(n, source, sink)

    def push_edge(self, u: int, v: int, capacity: Any, cost: Any) -> None:
        """Add a directed edge ``u -> v`` with a capacity and a cost per unit of flow."""
        self._add(u, v, capacity, cost)

    def set_k_flow(self, k: Any) -> None:
        """Limit the total flow to ``k`` by adding a new source in front of the old one."""
        new_source = self._add_super_source(k)
        self.push_edge(new_source, self._source, k, 0)
        self._source = new_source

    def dinic_mcmf(self) -> tuple[Any, Any]:
        """Minimum-cost maximum flow by repeated SPFA and blocking flows.

        Returns ``(total_cost, max_flow)``.
        """
        cap, flw, cost, adj, sink = self._cap, self._flow, self._cost, self._adj, self._sink
        max_flow: Any = 0
        total_cost: Any = 0
        visited = [False] * self._n

        while True:
            distance = self._spfa()
            if distance[sink] == math.inf:
                return total_cost, max_flow
            pointer = [0] * self._n

            def dfs(u: int, flow: Any) -> Any:
                nonlocal total_cost
                if u == sink or flow == 0:
                    return flow
                current = 0
                visited[u] = True
                edges = adj[u]
                while pointer[u] < len(edges):
                    v, ei = edges[pointer[u]]
                    if distance[v] == distance[u] + cost[ei] and not visited[v]:
                        pushed = dfs(v, min(flow - current, cap[ei] - flw[ei]))
                        if pushed > 0:
                            self._push(ei, pushed)
                            current += pushed
                            total_cost += pushed * cost[ei]
                            if current == flow:
                                break
                    pointer[u] += 1
                visited[u] = False
                return current

            while (pushed := dfs(self._source, math.inf)) > 0:
                max_flow += pushed

    def primal_dual_mcmf(self) -> tuple[Any, Any]:
        """Minimum-cost maximum flow with Dijkstra on potential-reduced costs.

        Returns ``(total_cost, max_flow)``.
        """
        cap, flw, cost, adj = self._cap, self._flow, self._cost, self._adj
        n, source, sink = self._n, self._source, self._sink
        potential = self._spfa()
        distance: list[Any] = []
        visited = [False] * n

        def reduced(u: int, v: int, ei: int) -> Any:
            return distance[u] + cost[ei] + potential[u] - potential[v]

        def dijkstra() -> bool:
            distance[:] = [math.inf] * n
            visited[:] = [False] * n
            distance[source] = 0
            heap = [(0, source)]
            while heap:
                _, u = heapq.heappop(heap)
                if visited[u]:
                    continue
                visited[u] = True
                for v, ei in adj[u]:
                    if flw[ei] >= cap[ei]:
                        continue
                    new_dist = reduced(u, v, ei)
                    if new_dist < distance[v]:
                        distance[v] = new_dist
                        heapq.heappush(heap, (new_dist, v))
            return distance[sink] != math.inf

        total_cost: Any = 0
        max_flow: Any = 0
        while dijkstra():
            visited[:] = [False] * n
            pointer = [0] * n

            def dfs(u: int, flow: Any) -> Any:
                if u == sink or flow == 0:
                    return flow
                current = 0
                visited[u] = True
                edges = adj[u]
                while pointer[u] < len(edges):
                    v, ei = edges[pointer[u]]
                    if distance[v] == reduced(u, v, ei) and not visited[v]:
                        pushed = dfs(v, min(flow - current, cap[ei] - flw[ei]))
                        if pushed > 0:
                            self._push(ei, pushed)
                            current += pushed
                            if current == flow:
                                break
                    pointer[u] += 1
                visited[u] = False
                return current

            while (pushed := dfs(source, math.inf)) > 0:
                max_flow += pushed
                total_cost += pushed * (distance[sink] + potential[sink])
            potential = [min(d + p, math.inf) for d, p in zip(distance, potential)]
        return total_cost, max_flow