#!/usr/bin/env python3
"""
mpi_solver.py: Distributed 3x3 cube solver using MPI.
Rank 0 owns the frontier; every level is scattered across all ranks,
expanded against the halfway table and gathered back.

    mpirun -n 4 python mpi_solver.py "R U R' U' F"
"""
import argparse
import sys

from mpi4py import MPI

from cube_model import InvalidColorStringError
from cube_moves import InvalidMoveError
from generate_db import DB_FILE, load_db
from regular_solver import MAX_FORWARD_DEPTH, expand_frontier, read_start_state, reconstruct_full_path


def solve_distributed(comm, start_state, backward_db, max_depth=MAX_FORWARD_DEPTH):
    """
    Collective call: every rank must enter it. start_state is only read on
    rank 0. Returns (solution, counts) on rank 0 and (None, None) elsewhere;
    solution is None when the forward budget runs out.
    """
    rank = comm.Get_rank()
    size = comm.Get_size()

    frontier = []
    global_visited = set()
    solution = None
    found_solution_flag = False
    local_state_count = 0

    if rank == 0:
        start_key = start_state.to_color_string()
        if start_key in backward_db:
            solution = reconstruct_full_path(start_key, [], backward_db)
            found_solution_flag = True
        else:
            frontier = [(start_state.clone(), [])]
            global_visited.add(start_key)

    step = 0
    while True:
        # --- A. DECISION PHASE ---
        instruction = "SEARCH"
        if rank == 0:
            if found_solution_flag:
                instruction = "DONE"
            elif not frontier or step >= max_depth:
                instruction = "FAIL"

        instruction = comm.bcast(instruction, root=0)
        if instruction in ("DONE", "FAIL"):
            break

        # --- B. WORK DISTRIBUTION ---
        chunks = None
        if rank == 0:
            print(f"[Step {step}] Frontier Size: {len(frontier)}", flush=True)
            pad_needed = (size - (len(frontier) % size)) % size
            frontier.extend([None] * pad_needed)
            k = len(frontier) // size
            chunks = [frontier[i * k:(i + 1) * k] for i in range(size)]

        local_tasks = comm.scatter(chunks, root=0)

        # --- C. LOCAL COMPUTATION ---
        solution_found, local_next_level, explored = expand_frontier(local_tasks, backward_db)
        local_state_count += explored

        # --- D. GATHER RESULTS ---
        all_solutions = comm.gather(solution_found, root=0)
        all_candidates = comm.gather(local_next_level, root=0)

        # --- E. MANAGER UPDATE ---
        if rank == 0:
            solution = next((s for s in all_solutions if s), None)
            if solution:
                found_solution_flag = True
            else:
                new_frontier = []
                for batch in all_candidates:
                    for state, path in batch:
                        key = state.to_color_string()
                        if key not in global_visited:
                            global_visited.add(key)
                            new_frontier.append((state, path))
                frontier = new_frontier
                step += 1

    all_counts = comm.gather(local_state_count, root=0)
    if rank == 0:
        return solution, all_counts
    return None, None


def print_statistics(all_counts):
    print("\n--- Cluster Statistics ---", flush=True)
    total_explored = sum(all_counts)
    print(f"{'Rank':<10} | {'States Explored':<15} | {'Contribution':<12}", flush=True)
    print("-" * 45, flush=True)
    for r, count in enumerate(all_counts):
        pct = (count / total_explored * 100) if total_explored > 0 else 0
        print(f"{r:<10} | {count:<15} | {pct:.1f}%", flush=True)
    print("-" * 45, flush=True)
    print(f"Total States Explored: {total_explored}", flush=True)


def main(argv=None):
    comm = MPI.COMM_WORLD
    rank = comm.Get_rank()

    parser = argparse.ArgumentParser(description="Distributed bounded cube solver")
    parser.add_argument("input", help="Color string or scramble sequence")
    parser.add_argument("--db", default=DB_FILE)
    parser.add_argument("--max-depth", type=int, default=MAX_FORWARD_DEPTH)
    args = parser.parse_args(argv)

    # --- 1. Load Database ---
    try:
        backward_db = load_db(args.db)
    except FileNotFoundError:
        if rank == 0:
            print(f"Error: {args.db} missing. Run generate_db.py first.", flush=True)
        comm.Abort(1)
        sys.exit(1)

    comm.Barrier()

    # --- 2. Setup Input (manager only) ---
    start_state = None
    if rank == 0:
        try:
            start_state = read_start_state(args.input)
        except (InvalidMoveError, InvalidColorStringError) as e:
            print(f"Error: {e}", flush=True)
            comm.Abort(1)
            sys.exit(1)
        print("[Manager] Solving...", flush=True)

    # --- 3. Synchronous BFS ---
    solution, all_counts = solve_distributed(comm, start_state, backward_db, args.max_depth)

    if rank == 0:
        if solution is None:
            print("Search exhausted. No solution.", flush=True)
        else:
            print("\n" + "=" * 40, flush=True)
            print("*** SOLUTION FOUND ***", flush=True)
            print(f"Moves: {len(solution)}", flush=True)
            print(f"Sequence: {' '.join(solution)}", flush=True)
            print("=" * 40, flush=True)
        print_statistics(all_counts)


if __name__ == "__main__":
    main()
