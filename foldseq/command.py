import datetime
import json
import logging
import sys
from abc import ABC, abstractmethod
from collections import namedtuple

from .func import OMITTED, reduce, trace
from .operators import DEFAULT_INITIAL, get_operator
from .report import CsvReport, PlotReport, steps_to_frame
from .sources import load_sequence, parse_value
from .utils import timer

_log = logging.getLogger(__name__)


class AbstractCommand(ABC):  # pragma: no cover
    def __init__(self, config, prog_args, *args, **kwargs):
        self.config = config
        self.prog_args = prog_args

    @abstractmethod
    def execute(self):
        raise NotImplementedError()


class FoldCommand(AbstractCommand):
    """Common handling of the sequence source, operator and initial value."""

    def build_sequence(self):
        if self.prog_args.file:
            with timer(f"Loading {self.prog_args.file}"):
                sequence = load_sequence(self.prog_args.file, column=self.prog_args.column)
        else:
            sequence = [parse_value(v) for v in self.prog_args.values]

        _log.info(f"Folding {len(sequence)} values")
        return sequence

    @property
    def operator_name(self):
        return self.prog_args.operator or self.config["FOLDSEQ_OPERATOR"]

    def initial_value(self):
        if self.prog_args.initial is not None:
            return parse_value(self.prog_args.initial)
        return DEFAULT_INITIAL.get(self.operator_name, OMITTED)

    def execute(self):
        func = get_operator(self.operator_name)
        sequence = self.build_sequence()
        initial = self.initial_value()

        with timer("Fold"):
            result = self.fold(sequence, func, initial)

        self.output(result)

    @abstractmethod
    def fold(self, sequence, func, initial):  # pragma: no cover
        raise NotImplementedError()

    @abstractmethod
    def output(self, result):  # pragma: no cover
        raise NotImplementedError()


class ReduceCommand(FoldCommand):
    def fold(self, sequence, func, initial):
        return reduce(sequence, func, initial)

    def output(self, result):
        try:
            text = json.dumps(result)
        except TypeError:
            text = repr(result)
        print(text)


class TraceCommand(FoldCommand):
    def __init__(self, config, prog_args, *args, **kwargs):
        super().__init__(config, prog_args, *args, **kwargs)

        timestamp_str = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        self.supported_reports = {
            "csv": (CsvReport, sys.stdout),
            "plot": (PlotReport, f"fold_{timestamp_str}.png"),
        }

    def fold(self, sequence, func, initial):
        _, steps = trace(sequence, func, initial)
        return steps

    def output(self, steps):
        ReportArgs = namedtuple("ReportArgs", ["report", "outfile"])
        report_args = ReportArgs(report=self.prog_args.report, outfile=self.prog_args.outfile)

        report_cls, default_file = self.supported_reports[report_args.report]
        report = report_cls(steps_to_frame(steps), file=(report_args.outfile or default_file), title=self.operator_name)

        with timer("Export"):
            report.export()

        if report_args.outfile:
            print(f"Created '{report_args.outfile}'.")
