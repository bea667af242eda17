# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

"""
Top-level CLI: export the design as verilog, simulate it, or render a
preview of the pattern from the reference model.
"""
import argparse
import enum
import logging
import os
import sys

from parol                import animation, preview, sim
from parol.manifest       import BuildManifest
from parol.top            import XmasTop
from parol.video.modeline import VGAModeline

class CliAction(str, enum.Enum):
    Verilog  = "verilog"
    Simulate = "sim"
    Preview  = "preview"

def top_level_cli(fragment=XmasTop, argv=None):

    # Configure logging.
    logging.getLogger().setLevel(logging.INFO)

    # Parse arguments
    parser = argparse.ArgumentParser()

    parser.add_argument('--modeline', type=str, default="640x480p59.94",
                        help=f"Static video mode, one of {list(VGAModeline.all_timings())}")
    parser.add_argument('--name', type=str, default="parol",
                        help="Top-level module name, also used to name build outputs.")
    parser.add_argument('--build-dir', type=str,
                        default=os.environ.get('PAROL_BUILD_DIR', 'build'),
                        help="Where to write build outputs (default: $PAROL_BUILD_DIR or 'build').")
    parser.add_argument('--frames', type=int, default=1,
                        help="Simulation: number of whole frames to simulate and save.")
    parser.add_argument('--vcd', action='store_true',
                        help="Simulation: enable dumping of traces to VCD file.")
    parser.add_argument('--counter', type=int, default=None,
                        help=("Preview: animation counter value to render. By default, "
                              "one frame per blink phase is rendered."))
    parser.add_argument('--verbose', action='store_true',
                        help="Enable debug logging.")

    parser.add_argument("action", type=CliAction,
                        choices=[a.value for a in CliAction])

    # Print help if no arguments are passed.
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(args=argv if argv else ["--help"])

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        modeline = VGAModeline.get(args.modeline)
    except ValueError as e:
        print(f"error: {e}")
        sys.exit(-1)

    assert args.frames > 0, "--frames must be at least 1"

    build_path = os.path.abspath(args.build_dir)
    if not os.path.exists(build_path):
        os.makedirs(build_path)
    logging.debug(f"build outputs: {build_path}")

    if args.action == CliAction.Preview:
        if args.counter is None:
            phase_step = 1 << (animation.COUNTER_BITS - animation.PHASE_BITS)
            counters = [phase * phase_step for phase in range(4)]
        else:
            counters = [args.counter % (1 << animation.COUNTER_BITS)]
        for counter in counters:
            preview.save_png(preview.render(counter), os.path.join(
                build_path, f"{args.name}_preview_phase{animation.blink_phase(counter)}.png"))
        return None

    assert callable(fragment)
    fragment = fragment(modeline=modeline)

    if args.action == CliAction.Verilog:
        dst = os.path.join(build_path, f"{args.name}.v")
        sim.write_verilog(fragment, dst, name=args.name)
        manifest = BuildManifest.from_modeline(args.name, args.modeline, modeline)
        manifest.verilog = os.path.basename(dst)
        manifest_path = os.path.join(build_path, f"{args.name}.json")
        logging.info(f"write manifest to '{manifest_path}'")
        manifest.write_to_path(manifest_path)

    if args.action == CliAction.Simulate:
        vcd_path = os.path.join(build_path, f"{args.name}.vcd") if args.vcd else None
        frames = sim.capture_frames(fragment, n_frames=args.frames, vcd_path=vcd_path)
        for n, frame in enumerate(frames):
            preview.save_png(frame, os.path.join(build_path, f"{args.name}_frame{n}.png"))

    return fragment

def main():
    top_level_cli()

if __name__ == "__main__":
    main()
