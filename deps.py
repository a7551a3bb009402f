"""Centralized imports for the app layer."""

# Standard library
import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

# External
from dotenv import load_dotenv
from fastapi import HTTPException
from openai import OpenAI
from pydantic import ValidationError
