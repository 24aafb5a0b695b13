"""
AI players for Pixel Pong
"""

from pixel_pong.ai.predictive_ai import PredictiveAI
from pixel_pong.ai.predictive_ai import predict_intercept
from pixel_pong.ai.predictive_ai import update_ai

__all__ = ["PredictiveAI", "predict_intercept", "update_ai"]
