HOME_URL = "/"
SIGN_IN_URL = "/signin"
GAME_URL = "/game"
SIGN_OUT_URL = "/signout"
VALIDATE_MOVE_URL = "/validateMove"
CHECK_TURN_URL = "/checkTurn"
BACKUP_MOVE_URL = "/backupMove"
RESIGN_GAME_URL = "/resignGame"
SUBMIT_TURN_URL = "/submitTurn"
SPECTATOR_GAME_URL = "/spectator/game"
SPECTATOR_STOP_WATCHING_URL = "/spectator/stopWatching"
SPECTATOR_CHECK_TURN_URL = "/spectator/checkTurn"
REPLAY_GAME_URL = "/replay/game"
REPLAY_NEXT_TURN_URL = "/replay/nextTurn"
REPLAY_PREVIOUS_TURN_URL = "/replay/previousTurn"
REPLAY_STOP_WATCHING_URL = "/replay/stopWatching"
