"""
Impact Classification
Maps projected warming onto the Low / Moderate / Severe impact levels.
"""

from typing import Dict, List, Optional
import logging

DEFAULT_LEVELS = [
    {'name': 'Low Impact', 'min': None, 'color': '#2ecc71',
     'description': 'Regions with minimal climate change effects, requiring standard adaptation measures.'},
    {'name': 'Moderate Impact', 'min': 1.0, 'color': '#e67e22',
     'description': 'Areas experiencing notable changes, requiring significant adaptation strategies.'},
    {'name': 'Severe Impact', 'min': 2.0, 'exclusive': True, 'color': '#e74c3c',
     'description': 'Zones facing critical climate challenges, demanding immediate intervention.'},
]


class ImpactClassifier:
    """
    Classifies projected temperature change into impact levels.
    """

    def __init__(self, config: Dict, logger: Optional[logging.Logger] = None):
        """
        Initialize impact classifier.

        Parameters:
        -----------
        config : dict
            Configuration dictionary
        logger : logging.Logger, optional
            Logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self._levels = config.get('impact', {}).get('levels') or DEFAULT_LEVELS

        if not self._levels or self._levels[0].get('min') is not None:
            raise ValueError("The first impact level must have no lower bound (min: null)")

    def levels(self) -> List[Dict]:
        """Configured impact levels, lowest first."""
        return [dict(level) for level in self._levels]

    def classify(self, temperature_change: float) -> Dict:
        """
        Get the impact level for a projected temperature change.

        A level applies from its ``min`` upward; with ``exclusive`` set the
        bound itself still belongs to the level below.

        Parameters:
        -----------
        temperature_change : float
            Projected warming in °C

        Returns:
        --------
        dict
            Level name, color, description and the classified value
        """
        value = float(temperature_change)
        selected = self._levels[0]

        for level in self._levels[1:]:
            bound = level['min']
            if value > bound or (value == bound and not level.get('exclusive', False)):
                selected = level
            else:
                break

        return {
            'name': selected['name'],
            'color': selected['color'],
            'description': selected.get('description', ''),
            'value': value,
        }
