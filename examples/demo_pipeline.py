# examples/demo_pipeline.py
from cg2d.pipeline import analyze, compute_hulls, compute_hulls_with_steps, run_job
from cg2d.points import gen_points

if __name__ == "__main__":
    pts = gen_points(5000, seed=42, dist="circle")
    res = compute_hulls(pts)
    print("Points:", len(pts))
    print("Jarvis:", res["jarvis"]["size"], f"{res['jarvis']['ms']:.2f} ms")
    print("Graham:", res["graham"]["size"], f"{res['graham']['ms']:.2f} ms")

    teach = compute_hulls_with_steps(gen_points(30, dist="clusters"), cap=10)
    for s in teach["graham"]["steps"]:
        print(" ", s["type"], s.get("which", ""), s["note"])

    # те саме, що отримав би воркер
    job = run_job({"n": 2000, "dist": "gaussian"})
    print("Job:", job["n"], job["seed"], job["dist"], job["jarvis"]["size"], job["graham"]["size"])

    for row in analyze(1000, 16000, 2, dist="square"):
        print(f"n={row['n']:>6}  jarvis {row['jarvis_ms']:8.2f} ms  graham {row['graham_ms']:8.2f} ms")
