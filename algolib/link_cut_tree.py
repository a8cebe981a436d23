"""Link-cut tree over a path monoid given by ``vertex`` and ``compress``."""

from __future__ import annotations


class _Node:
    __slots__ = ("id", "l", "r", "p", "info", "sum", "mus", "rev")

    def __init__(self, info, id_):
        self.id = id_
        self.info = info
        self.l = None
        self.r = None
        self.p = None
        self.sum = None
        self.mus = None
        self.rev = False

    def is_root(self):
        p = self.p
        return p is None or (p.l is not self and p.r is not self)


class LinkCutTree:
    """Dynamic forest with path folds.

    ``vertex(info)`` turns a vertex's info into a path value and
    ``compress(upper, lower)`` joins a path with the path hanging below it.
    """

    def __init__(self, vertex, compress):
        self._vertex = vertex
        self._compress = compress
        self._nodes = []

    # splay-tree plumbing

    def _toggle(self, t):
        t.l, t.r = t.r, t.l
        t.sum, t.mus = t.mus, t.sum
        t.rev = not t.rev

    def _push(self, t):
        if t.rev:
            if t.l:
                self._toggle(t.l)
            if t.r:
                self._toggle(t.r)
            t.rev = False

    def _update(self, t):
        compress = self._compress
        key = self._vertex(t.info)
        t.sum = key
        t.mus = key
        if t.l:
            t.sum = compress(t.l.sum, t.sum)
            t.mus = compress(t.mus, t.l.mus)
        if t.r:
            t.sum = compress(t.sum, t.r.sum)
            t.mus = compress(t.r.mus, t.mus)

    def _reattach(self, t, x, y):
        t.p = y
        if y:
            if y.l is x:
                y.l = t
            if y.r is x:
                y.r = t

    def _rotr(self, t):
        x = t.p
        y = x.p
        self._push(x)
        self._push(t)
        x.l = t.r
        if x.l:
            x.l.p = x
        t.r = x
        x.p = t
        self._update(x)
        self._update(t)
        self._reattach(t, x, y)

    def _rotl(self, t):
        x = t.p
        y = x.p
        self._push(x)
        self._push(t)
        x.r = t.l
        if x.r:
            x.r.p = x
        t.l = x
        x.p = t
        self._update(x)
        self._update(t)
        self._reattach(t, x, y)

    def _splay(self, t):
        self._push(t)
        while not t.is_root():
            q = t.p
            if q.is_root():
                self._push(q)
                self._push(t)
                if q.l is t:
                    self._rotr(t)
                else:
                    self._rotl(t)
            else:
                r = q.p
                self._push(r)
                self._push(q)
                self._push(t)
                if r.l is q:
                    if q.l is t:
                        self._rotr(q)
                        self._rotr(t)
                    else:
                        self._rotl(t)
                        self._rotr(t)
                else:
                    if q.r is t:
                        self._rotl(q)
                        self._rotl(t)
                    else:
                        self._rotr(t)
                        self._rotl(t)

    def _expose(self, t):
        rp = None
        cur = t
        while cur:
            self._splay(cur)
            cur.r = rp
            self._update(cur)
            rp = cur
            cur = cur.p
        self._splay(t)
        return rp

    def _evert(self, t):
        self._expose(t)
        self._toggle(t)
        self._push(t)

    def _connected(self, u, v):
        self._expose(u)
        self._expose(v)
        return u is v or u.p is not None

    def _node(self, u):
        if not 0 <= u < len(self._nodes):
            raise IndexError(f"vertex {u} out of range")
        return self._nodes[u]

    # public interface

    def alloc(self, info):
        """Add a new isolated vertex and return its index."""
        t = _Node(info, len(self._nodes))
        self._update(t)
        self._nodes.append(t)
        return t.id

    def expose(self, u):
        """Make the path from the root to ``u`` preferred."""
        self._expose(self._node(u))

    def link(self, u, v):
        """Reroot ``u``'s tree at ``u`` and hang it below ``v``."""
        child, parent = self._node(u), self._node(v)
        self._evert(child)
        if self._connected(child, parent):
            raise ValueError("child and parent must be in different trees")
        if child.l:
            raise ValueError("child must be a root")
        child.p = parent
        parent.r = child
        self._update(parent)

    def cut(self, u):
        """Detach ``u`` from its parent."""
        child = self._node(u)
        self._expose(child)
        parent = child.l
        if parent is None:
            raise ValueError("a root has no parent to cut from")
        child.l = None
        parent.p = None
        self._update(child)

    def evert(self, u):
        """Make ``u`` the root of its tree."""
        self._evert(self._node(u))

    def is_connected(self, u, v):
        return self._connected(self._node(u), self._node(v))

    def lca(self, u, v):
        """Lowest common ancestor under the current roots, or None if apart."""
        a, b = self._node(u), self._node(v)
        if not self._connected(a, b):
            return None
        self._expose(a)
        return self._expose(b).id

    def set_key(self, u, info):
        t = self._node(u)
        self._expose(t)
        t.info = info
        self._update(t)

    def query_path(self, u, v=None):
        """Fold of the path from the root to ``u``, or from ``u`` to ``v``."""
        if v is None:
            t = self._node(u)
            self._expose(t)
            return t.sum
        self._evert(self._node(u))
        return self.query_path(v)

    def find_first(self, u, check):
        """Walk from ``u`` towards the root; return ``(vertex, fold)`` for the
        first vertex whose path down to ``u`` satisfies ``check``, or
        ``(None, fold of the whole path)``.
        """
        t = self._node(u)
        self._expose(t)
        vertex, compress = self._vertex, self._compress
        acc = vertex(t.info)
        if check(acc):
            return t.id, acc
        t = t.l
        while t:
            self._push(t)
            if t.r:
                nxt = compress(t.r.sum, acc)
                if check(nxt):
                    t = t.r
                    continue
                acc = nxt
            nxt = compress(vertex(t.info), acc)
            if check(nxt):
                self._splay(t)
                return t.id, nxt
            acc = nxt
            t = t.l
        return None, acc