"""Vercel deployments and deploy hooks."""

from lychee_quick.vercel.client import Deployment, Project, VercelClient

__all__ = ["Deployment", "Project", "VercelClient"]
