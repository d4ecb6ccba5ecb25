"""Running per-morpheme mean of definition feature vectors."""

from semantics.features import FEATURE_COUNT


class EmbeddingAccumulator:
    """Accumulate feature vectors keyed by morpheme identity.

    Only a running mean and a count are kept per identity; the mean is
    updated incrementally (``mean += (value - mean) / count``) rather than
    summing a stored list at the end.
    """

    def __init__(self, dimensions=FEATURE_COUNT):
        self.dimensions = dimensions
        self._means = {}
        self._counts = {}

    def __len__(self):
        return len(self._means)

    def __contains__(self, identity):
        return identity in self._means

    def record(self, identity, vector):
        """Fold *vector* into the running mean for *identity*.

        Raises ValueError when the vector length does not match the
        accumulator's dimensionality.
        """
        if len(vector) != self.dimensions:
            raise ValueError(
                f"expected a {self.dimensions}-dimensional vector for "
                f"{identity!r}, got {len(vector)}"
            )
        mean = self._means.get(identity)
        if mean is None:
            self._means[identity] = [float(v) for v in vector]
            self._counts[identity] = 1
            return
        count = self._counts[identity] + 1
        for i, value in enumerate(vector):
            mean[i] += (value - mean[i]) / count
        self._counts[identity] = count

    def embedding_of(self, identity):
        """Mean vector for *identity*, or None if nothing was recorded."""
        mean = self._means.get(identity)
        return tuple(mean) if mean is not None else None

    def count_of(self, identity):
        return self._counts.get(identity, 0)

    def all_embeddings(self):
        """Snapshot of every embedding, ordered by ``(kind, text)``."""
        return {
            identity: tuple(self._means[identity])
            for identity in sorted(self._means)
        }

    def merge(self, other):
        """Fold another accumulator's means into this one, weighted by count."""
        if other.dimensions != self.dimensions:
            raise ValueError(
                f"cannot merge a {other.dimensions}-dimensional accumulator "
                f"into a {self.dimensions}-dimensional one"
            )
        for identity, other_mean in other._means.items():
            other_count = other._counts[identity]
            mean = self._means.get(identity)
            if mean is None:
                self._means[identity] = list(other_mean)
                self._counts[identity] = other_count
                continue
            total = self._counts[identity] + other_count
            for i, value in enumerate(other_mean):
                mean[i] += (value - mean[i]) * other_count / total
            self._counts[identity] = total
