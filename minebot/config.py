"""
Configuration centrale pour le bot Démineur.

Ce fichier contient tous les paramètres configurables du bot,
y compris les sélecteurs DOM et les temps d'attente.
"""

# Temps d'attente (en secondes)
WAIT_TIMES = {
    'page_load': 10,           # Temps d'attente maximum pour le chargement d'une page
    'element': 10,             # Temps d'attente pour trouver un élément
    'click_hold': 1.0,         # Durée d'appui sur le bouton de la souris
    'settle': 10,              # Temps maximum pour que la page se stabilise après une action
    'settle_pause': 0.2,       # Pause fixe après stabilisation (animations)
    'between_cycles': 0.0,     # Temps d'attente entre deux cycles de la boucle
}

# Paramètres du navigateur
BROWSER_CONFIG = {
    'headless': False,         # Mode sans affichage
    'maximize': True,          # Ouvre le navigateur en mode plein écran
    'user_agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
}

# Paramètres du jeu
GAME_CONFIG = {
    'url': 'https://minesweeper.online/',    # URL du jeu
    'board_selector': '#AreaBlock',          # Conteneur de la grille
    'cell_selector': '.cell',                # Une case de la grille
    'face_selector': '#top_area_face',       # Bouton "smiley" qui lance la partie
}

# Classes CSS portées par les cases et le smiley
DOM_CLASSES = {
    'opened': 'hdd_opened',
    'closed': 'hdd_closed',
    'flag': 'hdd_flag',
    'type_prefix': 'hdd_type',               # hdd_type0 .. hdd_type8 = indice
    'mine_types': (10, 11),                  # hdd_type10 = mine, hdd_type11 = mine explosée
    'face_win': 'hdd_top-area-face-win',
    'face_lose': 'hdd_top-area-face-lose',
}

# Paramètres de la boucle de jeu
LOOP_CONFIG = {
    'max_iterations': 2000,    # Garde-fou : nombre maximum de cycles
    'stop_on_outcome': True,   # S'arrête quand la surface signale une victoire/défaite
    'trace': False,            # Affiche chaque cycle
}

# Paramètres du simulateur hors-ligne
SIMULATOR_CONFIG = {
    'width': 9,
    'height': 9,
    'mines': 10,
}

# Chemins des fichiers
PATHS = {
    'logs': 'logs',
}
