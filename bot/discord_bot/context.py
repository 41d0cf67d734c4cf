from dataclasses import dataclass
import discord



@dataclass(frozen=True)
class InteractionContext:

    """
    One command invocation: the live session paired with the raw interaction.

    Attributes:
        session (discord.Client): The bot the interaction arrived on.
        interaction (discord.Interaction): The inbound interaction event.
    """

    session: discord.Client
    interaction: discord.Interaction

    @property
    def has_responded(self) -> bool:
        return self.interaction.response.is_done()

    @property
    def guild_id(self) -> int | None:
        return self.interaction.guild_id

    async def reply(self, content: str, ephemeral: bool = True):

        """ Sends a message through whichever response channel is still valid.

        An interaction accepts a single initial response; after it (or after a
        defer) every further message must be a follow-up.

        Args:
            content (str): Text of the message.
            ephemeral (bool): Whether only the invoking user can see it.

        Returns:
            None
        """

        if self.has_responded:
            await self.interaction.followup.send(content, ephemeral=ephemeral)
        else:
            await self.interaction.response.send_message(content, ephemeral=ephemeral)
