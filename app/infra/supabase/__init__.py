"""Supabase access: client singleton and table repositories"""
from .client import get_supabase_client, reset_supabase_client
from .repositories import RepositoryFactory

__all__ = ['get_supabase_client', 'reset_supabase_client', 'RepositoryFactory']
