def print_info(size, value, nodes, elapsed, move):
        nps = int(nodes / elapsed) if elapsed > 0 else 0
        move_str = str(move) if move is not None else "-"

        print(f"info size {size} score {value:+d} nodes {nodes} nps {nps} time {int(elapsed * 1000)} bestmove {move_str}")
