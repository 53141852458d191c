import importlib, os
from .recommender import Recommender

def load_recommender() -> Recommender:
    modpath = os.getenv("RECOMMENDER_MODULE")
    if not modpath:
        from investiq.model_impl.recommendation_engine import RecommendationEngine
        return RecommendationEngine()
    mod, factory = modpath.split(":")
    return getattr(importlib.import_module(mod), factory)()
