"""
Serverless AI Content Generator package.

Provides:
- A FastAPI app serving a static page and a Gemini-backed /api/generate proxy
- A uvicorn launcher for container hosts (Cloud Run style)
"""
