# core/utilities/config_manager.py
import json
import logging
from core.config import PathConfig, DEFAULT_SIMILARITY_FORMULA, REJECT_NON_FINITE
from core.similarity_engine.vector_math import VectorOps

logger = logging.getLogger(__name__)

class ConfigManager:
    DEFAULT_SETTINGS = {
        'similarity_formula': DEFAULT_SIMILARITY_FORMULA,
        'reject_non_finite': REJECT_NON_FINITE
    }

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.load()
        return cls._instance

    def load(self):
        self.config_path = PathConfig.get_config_path()
        try:
            if self.config_path.exists():
                with open(self.config_path, 'r') as f:
                    self.settings = json.load(f)

                # Ensure new settings exist
                for key, default in self.DEFAULT_SETTINGS.items():
                    if key not in self.settings:
                        self.settings[key] = default

                if self.settings['similarity_formula'] not in VectorOps.SIMILARITY_FORMULAS:
                    logger.warning(f"Unknown similarity formula in {self.config_path}, using default")
                    self.settings['similarity_formula'] = DEFAULT_SIMILARITY_FORMULA
            else:
                self.settings = self.DEFAULT_SETTINGS.copy()
        except (json.JSONDecodeError, OSError, TypeError) as e:
            logger.warning(f"Ignoring unreadable config {self.config_path}: {e}")
            self.settings = self.DEFAULT_SETTINGS.copy()

    def save(self):
        with open(self.config_path, 'w') as f:
            json.dump(self.settings, f, indent=2)

    def reset(self):
        """Restore default settings in memory."""
        self.settings = self.DEFAULT_SETTINGS.copy()

    def get(self, key, default=None):
        return self.settings.get(key, default)

    def set(self, key, value):
        self.settings[key] = value

    def get_similarity_formula(self):
        return self.get('similarity_formula', DEFAULT_SIMILARITY_FORMULA)

    def set_similarity_formula(self, value):
        if value not in VectorOps.SIMILARITY_FORMULAS:
            raise ValueError(f"Invalid similarity formula: {value}")
        self.set('similarity_formula', value)

    def get_similarity_formula_name(self):
        formula = self.get_similarity_formula()
        return VectorOps.SIMILARITY_FORMULAS.get(formula, 'Unknown')

    def get_reject_non_finite(self) -> bool:
        return self.get('reject_non_finite', REJECT_NON_FINITE)

    def set_reject_non_finite(self, value):
        self.set('reject_non_finite', bool(value))

# Singleton access
config_manager = ConfigManager()
