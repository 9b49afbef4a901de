import os, time, json, logging
import numpy as np
import matplotlib.pyplot as plt
from tqdm import trange

from .activations import Sigmoid
from .layers import Linear
from .model import Sequential
from .utils import ensure_dir, setup_logging

# ------------ config ------------
CFG_ENV_VAR = "NEURALNET_CFG_JSON"
DEFAULT_CFG = {
    "seed": 0,
    "learning_rate": 0.05,
    "epochs": 100_000,
    "log_every": 1000,
    "patience": None,
    "runs_dir": "runs",
    "run_name": None,
}
# --------------------------------

def train(
    model, X, Y,
    lr=0.05,
    epochs=1000,
    shuffle=False,
    seed=0,
    log_every=None,
    patience=None,
    rel_improve_thresh=0.01,
    runs_dir=None,
    run_name=None,
    progress=True,
):
    """
    Online gradient descent: one forward/backward per sample, every epoch.

    X and Y are sequences of samples (one input/target vector each).
    Returns (meta, epoch_losses); epoch_losses[k] is the mean MSE loss of
    epoch k measured before each sample's update.
    """
    X = [np.asarray(x, dtype=np.float64) for x in X]
    Y = [np.asarray(y, dtype=np.float64) for y in Y]
    if len(X) != len(Y):
        raise ValueError(f"X has {len(X)} samples but Y has {len(Y)}")
    if not X:
        raise ValueError("Cannot train on an empty dataset")

    rng = np.random.default_rng(seed)
    order = np.arange(len(X))
    epoch_losses = []

    for epoch in trange(epochs, desc="epochs", disable=not progress):
        if shuffle:
            rng.shuffle(order)

        running_loss_sum = 0.0
        for k in order:
            loss, _ = model.train_step(X[k], Y[k], lr)
            running_loss_sum += loss
        epoch_losses.append(running_loss_sum / len(X))

        if log_every and epoch % log_every == 0:
            logging.info(f"[{epoch:06d}/{epochs}] loss={epoch_losses[-1]:.6f}")

        if patience and len(epoch_losses) > patience:
            prev = epoch_losses[-(patience + 1)]
            curr = epoch_losses[-1]
            if curr >= (1.0 - rel_improve_thresh) * prev:
                logging.info(f"Stopping early at epoch {epoch}: loss {curr:.6f} vs {prev:.6f}")
                break

    meta = dict(
        learning_rate=lr,
        max_epochs=epochs,
        epochs_run=len(epoch_losses),
        initial_loss=epoch_losses[0] if epoch_losses else None,
        final_loss=epoch_losses[-1] if epoch_losses else None,
        patience=patience,
        rel_improve_thresh=rel_improve_thresh,
        n_samples=len(X),
        shuffle=shuffle,
        seed=seed,
    )

    if runs_dir is not None:
        ts = time.strftime("%Y%m%d-%H%M%S")
        run_name = run_name or f"run-{ts}"
        run_dir = os.path.join(runs_dir, run_name)
        ensure_dir(run_dir)

        plt.figure()
        plt.plot(epoch_losses, label="loss")
        plt.xlabel("Epoch")
        plt.ylabel("Training Loss")
        plt.title("Loss vs Epochs")
        plt.tight_layout()
        plot_path = os.path.join(run_dir, "loss_vs_epochs.png")
        plt.savefig(plot_path)
        plt.close()

        meta.update(run_dir=run_dir, plot_path=plot_path)
        with open(os.path.join(run_dir, "run_meta.json"), "w") as f:
            json.dump(meta, f, indent=2)
        logging.info(f"Run artefacts saved to {run_dir}")

    return meta, epoch_losses


def build_demo_network(seed=None):
    rng = np.random.default_rng(seed)
    return Sequential([
        Linear(2, 1, False, seed=rng),
        Sigmoid(1),
        Linear(1, 2, False, seed=rng),
        Sigmoid(2),
    ])


def load_config(env=None):
    env = os.environ if env is None else env
    cfg = dict(DEFAULT_CFG)
    if env.get(CFG_ENV_VAR):
        try:
            override = json.loads(env[CFG_ENV_VAR])
        except json.JSONDecodeError as e:
            logging.warning(f"Failed to parse {CFG_ENV_VAR}: {e}")
            return cfg
        if isinstance(override, dict):
            cfg.update(override)
        else:
            logging.warning(f"{CFG_ENV_VAR} must be a JSON object, got {type(override).__name__}")
    return cfg


def main():
    cfg = load_config()
    setup_logging("train.log")
    logging.info(f"Config: {cfg}")

    model = build_demo_network(cfg["seed"])
    x, y = [0.59, 0.1], [1.0, 0.0]

    meta, _ = train(
        model, [x], [y],
        lr=cfg["learning_rate"],
        epochs=cfg["epochs"],
        log_every=cfg["log_every"],
        patience=cfg["patience"],
        runs_dir=cfg["runs_dir"],
        run_name=cfg["run_name"],
    )
    if meta["final_loss"] is not None:
        logging.info(f"Final loss: {meta['final_loss']:.6f}")
    model.display()


if __name__ == "__main__":
    main()
