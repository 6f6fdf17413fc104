"""
Constantes globais do sistema PawBot.

Este módulo centraliza todas as constantes 'hardcoded' do sistema,
facilitando a manutenção e a aplicação do princípio DRY.
"""

from typing import Dict, FrozenSet

# ============================================================================
# URLs e Endpoints
# ============================================================================

BASE_WALLET_URL = "https://pan-wallet-api.pawwallet.app/api/v1"
BASE_GAME_URL = "https://robot-cat-game-api.pawwallet.app/api/v1"

WALLET_ENDPOINTS: Dict[str, str] = {
    "track": "/wallet/track",
    "login": "/login",
    "referral": "/referral/invited",
}

GAME_ENDPOINTS: Dict[str, str] = {
    "login": "/login",
    "state": "/game",
    "session_start": "/player/start-session",
    "upgrade": "/player/upgrade",
    "claim": "/player/claim",
    "missions": "/missions",
    "mission_verify": "/missions/verify",
    "mission_claim": "/missions/claim",
    "leaderboard": "/game/leaderboard",
    "buy_heart": "/player/buy-heart",
}

# ============================================================================
# Regras do Jogo
# ============================================================================

SESSION_DURATION_SECONDS = 2 * 60 * 60
RETRY_DELAY_SECONDS = 5 * 60
MIN_HEARTS = 3
INVITE_FRIENDS_MISSION_ID = 6
REFERRAL_PAGE_SIZE = 100

# Mensagens de conflito: a ação pedida já está satisfeita no servidor
CONFLICT_PLAYER_IN_SESSION = "PLAYER_ALREADY_IN_SESSION"
CONFLICT_UPGRADE_IN_PROGRESS = "UPGRADE_IN_PROGRESS"
CONFLICT_MESSAGES: FrozenSet[str] = frozenset({
    CONFLICT_PLAYER_IN_SESSION,
    CONFLICT_UPGRADE_IN_PROGRESS,
})

CURRENCY = "RCAT"

# ============================================================================
# Headers HTTP
# ============================================================================

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)
DEFAULT_ORIGIN = "https://pan-wallet.pawwallet.app"

DEFAULT_HEADERS: Dict[str, str] = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.9",
    "Content-Type": "application/json",
    "Sec-Ch-Ua": '"Microsoft Edge";v="131", "Chromium";v="131", "Not_A_Brand";v="24"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"Windows"',
}

# ============================================================================
# Logging
# ============================================================================

LEVEL_VALUES: Dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "SUCCESS": 25,  # Nível customizado
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}

LEVEL_NAMES: Dict[int, str] = {v: k for k, v in LEVEL_VALUES.items()}

# ============================================================================
# Padrões
# ============================================================================

DEFAULTS = {
    "credentials_file": "data.txt",
    "config_file": "config.yaml",
    "timeout_api": 30,
}
