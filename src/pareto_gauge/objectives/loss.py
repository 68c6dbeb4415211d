"""Loss functions comparing predictions against labels."""

import numpy as np

from pareto_gauge.errors import DimensionMismatch


class AbsoluteLoss:
    """Absolute loss generalized to vector-valued outputs.

    For scalar outputs this is |label - prediction|. For vector outputs each
    row contributes the Euclidean norm of its difference, and the batch loss
    is the sum over rows.

    Example:
        >>> AbsoluteLoss()(np.array([[0.0, 0.0], [1.0, 1.0]]), np.array([[3.0, 4.0], [1.0, 1.0]]))
        5.0
    """

    name = "AbsoluteLoss"
    output_dimensions = 1

    def __call__(self, labels: np.ndarray, predictions: np.ndarray) -> float:
        labels = np.asarray(labels, dtype=np.float64)
        predictions = np.asarray(predictions, dtype=np.float64)
        if labels.ndim == 1:
            labels = labels[np.newaxis, :]
        if predictions.ndim == 1:
            predictions = predictions[np.newaxis, :]
        if labels.shape != predictions.shape:
            raise DimensionMismatch(f"labels have shape {labels.shape}, predictions have shape {predictions.shape}")
        return float(np.linalg.norm(predictions - labels, axis=1).sum())

    def __repr__(self) -> str:
        return "AbsoluteLoss()"
