"""Futures response models, order parameter builders and stream clients."""