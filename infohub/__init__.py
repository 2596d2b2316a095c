"""InfoHub Dashboard Package.

Small Streamlit dashboard with three independent widgets:
- Weather lookup (simulated provider)
- INR currency conversion (simulated provider)
- Motivational quotes (Gemini API with local fallback)
"""

__version__ = "1.0.0"
