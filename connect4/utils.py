from typing import Dict

from connect4.defensive_agent import DefensiveAgent
from connect4.random_agent import RandomAgent

# Registered agents, by CLI name
AGENTS: Dict[str, type] = {
    "defensive": DefensiveAgent,
    "random": RandomAgent,
}


def find_agent(name: str) -> type:
    try:
        return AGENTS[name]
    except KeyError:
        raise ValueError(f"Unknown agent {name!r}; choose from {sorted(AGENTS)}") from None
