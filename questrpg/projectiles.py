"""Firing and flying shots, for the hero and for the monsters."""

from __future__ import annotations

from typing import Iterable, Optional

from questrpg.entities import Mob, Projectile
from questrpg.geometry import Rect, Vec2, is_hit
from questrpg.skins import Direction, power_skin, switch_skin

SHOT_SPEED = 15
MUZZLE = Vec2(30, 55)
# A shot lapses once its clock shows more than this many hundredths of a second.
SHOT_LIFETIME_TICKS = 3000
SHOT_DAMAGE = 50
MOB_SHOT_DAMAGE = 10
FIELD_WIDTH = 1900
FIELD_HEIGHT = 1000


def _bounds(mob: Mob) -> Rect:
    return mob.skin.moved_to(mob.pos)


def _launch(shot: Projectile, origin: Vec2, direction: Direction, skin: Rect) -> None:
    shot.skin = skin
    shot.pos = origin + MUZZLE
    shot.active = True
    shot.direction = direction


def mob_fire(mob: Mob) -> bool:
    """Fire the monster's shot the way it faces, unless it is already in flight."""
    shot = mob.power
    if shot is None or shot.style is None or shot.active or mob.facing is None:
        return False
    _launch(shot, mob.pos, mob.facing, switch_skin(shot.style, mob.facing.power_frame))
    return True


def player_fire(player: Mob) -> bool:
    """Fire the hero's shot the way it faces, unless it is already in flight."""
    shot = player.power
    if shot is None or shot.active or player.facing is None:
        return False
    _launch(shot, player.pos, player.facing, power_skin(player.facing.power_frame))
    return True


def _expired(shot: Projectile) -> bool:
    x, y = shot.pos.x, shot.pos.y
    return (
        shot.since_ms / 10 > SHOT_LIFETIME_TICKS
        or y <= 0
        or y >= FIELD_HEIGHT
        or x <= 0
        or x >= FIELD_WIDTH
    )


def _in_play(shot: Projectile) -> bool:
    return shot.direction is not None and shot.pos.x != 0 and shot.pos.y != 0


def _fly(shot: Projectile) -> None:
    assert shot.direction is not None
    dx, dy = shot.direction.unit
    shot.pos = shot.pos.shifted(dx * SHOT_SPEED, dy * SHOT_SPEED)


def _reset_mob_shot(shot: Projectile, player: Mob) -> None:
    # Every monster shot that ends, by hitting or by lapsing, costs the hero.
    shot.reset()
    player.life -= MOB_SHOT_DAMAGE


def strike(projectile: Projectile, target: Mob) -> bool:
    """Hurt ``target`` if the shot is strictly inside it; returns whether it hit."""
    if is_hit(projectile.pos, _bounds(target)):
        target.life -= SHOT_DAMAGE
        return True
    return False


def advance_mob_shot(mob: Mob, player: Mob, elapsed_ms: float) -> bool:
    """Move a monster's shot one frame; returns whether it hit the hero."""
    shot = mob.power
    if shot is None:
        return False
    shot.since_ms += elapsed_ms
    if not shot.active:
        return False
    if _expired(shot):
        shot.active = False
        _reset_mob_shot(shot, player)
        return False
    hit = False
    if _in_play(shot):
        if is_hit(shot.pos, _bounds(player)):
            _reset_mob_shot(shot, player)
            hit = True
        else:
            _fly(shot)
    shot.since_ms = 0.0
    return hit


def advance_player_shot(
    player: Mob, targets: Iterable[Mob], elapsed_ms: float
) -> Optional[Mob]:
    """Move the hero's shot one frame; returns the first target it hit, if any."""
    shot = player.power
    if shot is None:
        return None
    shot.since_ms += elapsed_ms
    if not shot.active:
        return None
    if _expired(shot):
        shot.active = False
        shot.reset()
        return None
    hit: Optional[Mob] = None
    if _in_play(shot):
        hit = next((target for target in targets if strike(shot, target)), None)
        if hit is not None:
            shot.reset()
        else:
            _fly(shot)
    shot.since_ms = 0.0
    return hit