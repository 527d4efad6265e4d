"""Structured-data encoding of game values."""

from __future__ import annotations

from salvo.game.core.board import Board
from salvo.game.core.geometry import in_bounds
from salvo.game.core.models import (
    Coord,
    Direction,
    Game,
    Player,
    PlayerType,
    Ship,
    ShipTemplate,
    ShipType,
)
from salvo.game.core.placement import validate_placement

PAYLOAD_VERSION = 1


def game_to_payload(game: Game) -> dict[str, object]:
    """Convert a game to a JSON-serializable payload."""
    return {
        "version": PAYLOAD_VERSION,
        "playerOne": _player_to_payload(game.player_one),
        "playerTwo": _player_to_payload(game.player_two),
        "boardOne": _board_to_payload(game.board_one),
        "boardTwo": _board_to_payload(game.board_two),
        "moveCounter": game.move_counter,
    }


def payload_to_game(payload: dict[str, object]) -> Game:
    """Convert a loaded payload back into a game value."""
    raw_version = payload.get("version", PAYLOAD_VERSION)
    if not isinstance(raw_version, (int, str)):
        raise ValueError("Payload version must be int-compatible.")
    if int(raw_version) != PAYLOAD_VERSION:
        raise ValueError("Unsupported payload version.")

    raw_counter = payload.get("moveCounter", 0)
    if not isinstance(raw_counter, int) or raw_counter < 0:
        raise ValueError("moveCounter must be a non-negative integer.")

    try:
        return Game(
            player_one=_payload_to_player(payload["playerOne"]),
            player_two=_payload_to_player(payload["playerTwo"]),
            board_one=_payload_to_board(payload["boardOne"]),
            board_two=_payload_to_board(payload["boardTwo"]),
            move_counter=raw_counter,
        )
    except KeyError as exc:
        raise ValueError(f"Missing game field: {exc.args[0]}.") from exc


def _coord_to_payload(coord: Coord) -> dict[str, int]:
    return {"x": coord.x, "y": coord.y}


def _player_to_payload(player: Player) -> dict[str, object]:
    return {"name": player.name, "type": player.type.value, "turn": player.turn}


def _ship_to_payload(ship: Ship) -> dict[str, object]:
    return {
        "type": ship.type.value,
        "length": ship.length,
        "hits": [_coord_to_payload(cell) for cell in ship.hits],
        "alive": ship.alive,
        "location": [_coord_to_payload(cell) for cell in ship.location],
    }


def _board_to_payload(board: Board) -> dict[str, object]:
    return {
        "recievedStrikes": [_coord_to_payload(cell) for cell in board.received_strikes],
        "ships": [_ship_to_payload(ship) for ship in board.ships],
    }


def _payload_to_coord(item: object) -> Coord:
    if not isinstance(item, dict):
        raise ValueError("Coordinate must be an object.")
    try:
        x, y = item["x"], item["y"]
    except KeyError as exc:
        raise ValueError("Malformed coordinate in payload.") from exc
    if not _is_int(x) or not _is_int(y):
        raise ValueError(f"Coordinate values must be integers, got ({x!r}, {y!r}).")
    return Coord(x=x, y=y)


def _payload_to_coords(items: object) -> tuple[Coord, ...]:
    if not isinstance(items, list):
        raise ValueError("Coordinate sequence must be a list.")
    return tuple(_payload_to_coord(item) for item in items)


def _payload_to_player(item: object) -> Player:
    if not isinstance(item, dict):
        raise ValueError("Player must be an object.")
    try:
        return Player(
            name=str(item["name"]),
            type=PlayerType(str(item["type"])),
            turn=bool(item["turn"]),
        )
    except (KeyError, ValueError) as exc:
        raise ValueError("Malformed player entry in payload.") from exc


def _payload_to_ship(item: object) -> Ship:
    if not isinstance(item, dict):
        raise ValueError("Each ship must be an object.")
    try:
        ship_type = ShipType(str(item["type"]))
        length = item["length"]
        location = _payload_to_coords(item["location"])
        hits = _payload_to_coords(item.get("hits", []))
    except (KeyError, TypeError) as exc:
        raise ValueError("Malformed ship entry in payload.") from exc
    except ValueError as exc:
        raise ValueError(f"Malformed ship entry in payload: {exc}") from exc
    if not _is_int(length) or length != ship_type.length or len(location) != length:
        raise ValueError(f"Ship {ship_type.value} location does not match its length.")
    if len(set(hits)) != len(hits) or not set(hits).issubset(location):
        raise ValueError(f"Ship {ship_type.value} has hits outside its location.")
    alive = not set(location).issubset(hits)
    return Ship(type=ship_type, length=length, location=location, hits=hits, alive=alive)


def _payload_to_board(item: object) -> Board:
    """Rebuild a board, re-checking every ship against the placement rules."""
    if not isinstance(item, dict):
        raise ValueError("Board must be an object.")
    raw_ships = item.get("ships", [])
    if not isinstance(raw_ships, list):
        raise ValueError("Board ships must be a list.")

    board = Board()
    for raw_ship in raw_ships:
        ship = _payload_to_ship(raw_ship)
        origin = ship.location[0]
        direction = _infer_direction(ship.location)
        cells, error = validate_placement(
            board, ShipTemplate.for_type(ship.type), origin, direction
        )
        if cells != ship.location:
            raise ValueError(f"Ship {ship.type.value} cells are not contiguous along one axis.")
        if error is not None:
            raise ValueError(f"Ship {ship.type.value} placement is invalid: {error.message}.")
        board = board.with_ship(ship)

    strikes = _payload_to_coords(item.get("recievedStrikes", []))
    if len(set(strikes)) != len(strikes):
        raise ValueError("Board received the same strike twice.")
    if any(not in_bounds(cell) for cell in strikes):
        raise ValueError("Board received a strike outside the grid.")
    struck = set(strikes)
    for ship in board.ships:
        if not set(ship.hits).issubset(struck):
            raise ValueError(f"Ship {ship.type.value} has hits that were never struck.")
    return Board(ships=board.ships, received_strikes=strikes)


def _infer_direction(location: tuple[Coord, ...]) -> Direction:
    if len(location) > 1 and location[1].y == location[0].y:
        return Direction.HORIZONTAL
    return Direction.VERTICAL


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
