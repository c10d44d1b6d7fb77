"""Implementation of the ``convert`` command."""

from typing import final, override

from tagsync.features.convert import BatchEncoder, EncoderPort
from tagsync.platform.encoder import FfmpegEncoder
from tagsync.ui.cli.args.options import ConvertArgs
from tagsync.ui.cli.commands.executor import CommandExecutor


@final
class ConvertCommand(CommandExecutor[ConvertArgs]):
    """Encode the given WAV files to FLAC."""

    def __init__(self, args: ConvertArgs, encoder: EncoderPort | None = None) -> None:
        super().__init__(args)
        self.encoder = encoder or FfmpegEncoder(args.encoder)

    @override
    def execute(self) -> None:
        _ = BatchEncoder(self.encoder).run(self.args.files)
