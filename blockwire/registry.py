"""Lookup of incoming packet classes by protocol state and packet id."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from . import serverbound as sb
from . import serverbound_play as play
from .serverbound import PacketState
from .wire import Buffer


class UnknownPacketError(LookupError):
    """Raised when no incoming packet is registered for a state and id."""

    def __init__(self, state: PacketState, packet_id: int) -> None:
        super().__init__(f"no incoming packet 0x{packet_id:02X} in state {state.value}")
        self.state = state
        self.packet_id = packet_id


INCOMING: Mapping[PacketState, Mapping[int, type]] = MappingProxyType(
    {
        PacketState.HANDSHAKE: MappingProxyType({0x00: sb.Handshake}),
        PacketState.STATUS: MappingProxyType({0x00: sb.StatusRequest, 0x01: sb.Ping}),
        PacketState.LOGIN: MappingProxyType(
            {
                0x00: sb.LoginStart,
                0x01: sb.EncryptionResponse,
                0x02: sb.LoginPluginResponse,
                0x03: sb.LoginAcknowledged,
            }
        ),
        PacketState.CONFIGURATION: MappingProxyType(
            {
                0x00: sb.ClientInformation,
                0x02: sb.CustomPayload,
                0x03: sb.FinishConfiguration,
                0x07: sb.SelectKnownPacks,
            }
        ),
        PacketState.PLAY: MappingProxyType(
            {
                0x00: play.AcceptTeleportation,
                0x05: play.ChatCommand,
                0x08: play.ChatSessionUpdate,
                0x09: play.ChunkBatchReceived,
                0x0B: play.ClientTickEnd,
                0x11: play.ContainerClose,
                0x1A: play.KeepAlive,
                0x1C: play.MovePlayerPos,
                0x1D: play.MovePlayerPosRot,
                0x1E: play.MovePlayerRot,
                0x1F: play.MovePlayerStatusOnly,
                0x26: play.PlayerAbilities,
                0x27: play.PlayerAction,
                0x28: play.PlayerCommand,
                0x29: play.PlayerInput,
                0x2A: play.PlayerLoaded,
                0x3A: play.Swing,
            }
        ),
    }
)


def incoming_packet_type(state: PacketState, packet_id: int) -> type:
    """Return the packet class registered for ``packet_id`` in ``state``."""
    try:
        return INCOMING[state][packet_id]
    except KeyError:
        raise UnknownPacketError(state, packet_id) from None


def decode_packet(state: PacketState, packet_id: int, reader: Buffer) -> Any:
    """Decode the body of an incoming packet from ``reader``."""
    return incoming_packet_type(state, packet_id).decode(reader)