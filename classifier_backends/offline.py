"""
Classifier backend: offline
Does not call any model. Every image goes down the filename/size fallback path.
"""
from classifier import ClassifierUnavailable


def classify(image_path: str) -> list:
    raise ClassifierUnavailable("Offline backend selected: no classification model configured.")
